from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from access_sentinel.app.repositories.account_repository import IAccountRepository
from access_sentinel.domain.entities import Account, AccountRole


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        stmt = select(Account).where(Account.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_for_update(self, account_id: UUID) -> Optional[Account]:
        """Re-read an account with a row lock, overwriting the identity map copy"""
        stmt = (
            select(Account)
            .where(Account.id == account_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Account]:
        stmt = select(Account).order_by(Account.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_face_candidates(self) -> List[Account]:
        stmt = (
            select(Account)
            .where(Account.role == AccountRole.user)
            .where(Account.face_embedding.is_not(None))
            .order_by(Account.created_at, Account.id)
        )
        result = await self.session.exec(stmt)
        # Empty embeddings are not candidates
        return [account for account in result.all() if account.has_face_embedding]

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(Account))
        return result.one()

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def delete(self, account: Account) -> None:
        await self.session.delete(account)
        await self.session.flush()
