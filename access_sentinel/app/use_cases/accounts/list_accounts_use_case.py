from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.app.use_cases.auth.dtos import AccountSummary
from access_sentinel.libs.result import Result, Return

from .dtos import AccountListResponse


class ListAccountsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[AccountListResponse]:
        async with self.uow:
            accounts = await self.uow.accounts.list_all()
            return Return.ok(
                AccountListResponse(
                    accounts=[AccountSummary.from_account(a) for a in accounts]
                )
            )
