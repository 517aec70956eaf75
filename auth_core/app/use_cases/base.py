"""
Shared plumbing for use cases that talk to the session store.
"""

import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.domain.errors import AuthError, InfrastructureError
from auth_core.domain.result import Result, Return

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreUseCase:
    """
    Base for use cases running against a UnitOfWork.

    Every store call goes through _store(), which bounds it by store_timeout
    and turns driver failures into InfrastructureError. Cancellation is never
    caught here; the unit of work's exit rolls back whatever was not committed.
    """

    def __init__(self, uow: UnitOfWork, store_timeout: Optional[float] = None):
        self.uow = uow
        self.store_timeout = store_timeout

    async def _store(
        self,
        awaitable: Awaitable[T],
        code: str = "STORE_FAILURE",
        message: str = "Session store operation failed",
        conflict: Optional[AuthError] = None,
    ) -> T:
        """
        Await a store call under the store timeout.

        Args:
            conflict: raised instead of InfrastructureError when the store
                rejects the write on a unique constraint
        """
        try:
            async with asyncio.timeout(self.store_timeout):
                return await awaitable
        except TimeoutError:
            logger.error(f"Store call timed out after {self.store_timeout}s ({code})")
            raise InfrastructureError(
                "STORE_TIMEOUT", "Session store did not respond in time", "store"
            )
        except IntegrityError as e:
            if conflict is None:
                logger.error(f"Store call failed ({code}): {e}")
                raise InfrastructureError(code, message, "store")
            logger.warning(f"Store rejected write as conflicting: {conflict.code}")
            raise conflict
        except SQLAlchemyError as e:
            logger.error(f"Store call failed ({code}): {e}")
            raise InfrastructureError(code, message, "store")

    @staticmethod
    def _fail(exc: AuthError, action: str) -> Result:
        if isinstance(exc, InfrastructureError):
            logger.error(f"{action} failed: {exc.code}")
        else:
            logger.warning(f"{action} rejected: {exc.code}")
        return Return.err(exc.to_error())
