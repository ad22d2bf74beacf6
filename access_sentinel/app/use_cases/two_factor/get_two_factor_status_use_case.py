from uuid import UUID

from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.base import ensure_utc
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .dtos import TwoFactorStatusResponse


class GetTwoFactorStatusUseCase:
    """Reports whether 2FA is on and whether an unexpired enrollment is pending."""

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, account_id: UUID) -> Result[TwoFactorStatusResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.NOT_FOUND, "Account not found"))

            expires_at = ensure_utc(account.pending_two_factor_expires_at)
            pending = (
                account.pending_two_factor_secret is not None
                and expires_at is not None
                and self.clock.now() < expires_at
            )
            return Return.ok(
                TwoFactorStatusResponse(
                    enabled=account.two_factor_enabled,
                    enrollment_pending=pending,
                    enrollment_expires_at=expires_at if pending else None,
                )
            )
