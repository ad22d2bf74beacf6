from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from access_sentinel.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def get_for_update(self, account_id: UUID) -> Optional[Account]:
        """
        Re-read an account for a read-decide-write cycle.

        Implementations must return fresh column values (not a cached copy)
        and take a row lock where the database supports it.
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Account]:
        """List all accounts, newest first"""
        pass

    @abstractmethod
    async def list_face_candidates(self) -> List[Account]:
        """List user accounts carrying a face embedding, in a stable order"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all accounts"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass

    @abstractmethod
    async def delete(self, account: Account) -> None:
        """Delete an account"""
        pass
