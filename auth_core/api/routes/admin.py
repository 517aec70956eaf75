"""
Admin API Routes - Operator Endpoints

Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from auth_core.api.error import raise_for_errors
from auth_core.api.utils.admin_auth import verify_admin_api_key
from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.app.use_cases.auth import ErrorInfo
from auth_core.app.use_cases.sessions import PurgeExpiredSessionsUseCase, PurgeSessionsResponse
from auth_core.depends import get_store_timeout, get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/sessions/purge",
    status_code=status.HTTP_200_OK,
    response_model=PurgeSessionsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_sessions(
    uow: UnitOfWork = Depends(get_unit_of_work),
    store_timeout: float = Depends(get_store_timeout),
):
    """
    Purge Expired Sessions

    Hard-deletes expired and revoked sessions and reports how many active
    sessions remain.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: SESSION_CLEANUP_FAILED, SESSION_COUNT_FAILED
    """
    use_case = PurgeExpiredSessionsUseCase(uow, store_timeout)
    result = await use_case.execute()
    raise_for_errors([ErrorInfo.from_error(e) for e in result.errors])
    return result.value
