from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from auth_core.api.error import raise_for_errors
from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.app.use_cases.auth import ErrorInfo, TokenClaims
from auth_core.app.use_cases.sessions import (
    ListSessionsUseCase,
    RevokeSessionsResponse,
    RevokeSessionsUseCase,
    SessionInfo,
)
from auth_core.depends import get_current_user, get_store_timeout, get_unit_of_work

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[SessionInfo])
async def list_sessions(
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    store_timeout: float = Depends(get_store_timeout),
):
    """
    List Sessions

    Every session of the caller, newest first, including revoked and
    expired ones with active=false.
    """
    use_case = ListSessionsUseCase(uow, store_timeout)
    result = await use_case.execute(UUID(current_user.user_id))
    raise_for_errors([ErrorInfo.from_error(e) for e in result.errors])
    return result.value


@router.post(
    "/revoke-all",
    status_code=status.HTTP_200_OK,
    response_model=RevokeSessionsResponse,
)
async def revoke_all_sessions(
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    store_timeout: float = Depends(get_store_timeout),
):
    """
    Revoke All Sessions

    Logs the caller out everywhere. Access tokens already issued stay valid
    until they expire.

    Raises:
        - 401 Unauthorized: missing or invalid access token
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: store failure
    """
    use_case = RevokeSessionsUseCase(uow, store_timeout)
    result = await use_case.execute(UUID(current_user.user_id))
    raise_for_errors([ErrorInfo.from_error(e) for e in result.errors])
    return result.value
