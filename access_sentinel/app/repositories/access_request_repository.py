from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from access_sentinel.domain.entities import AccessRequest, AccessRequestStatus


class IAccessRequestRepository(ABC):
    """AccessRequest repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[AccessRequest]:
        """Get access request by ID"""
        pass

    @abstractmethod
    async def get_active(
        self, requester_id: UUID, resource_id: str
    ) -> Optional[AccessRequest]:
        """Get the pending or approved request for a (requester, resource) pair"""
        pass

    @abstractmethod
    async def list_all(self) -> List[AccessRequest]:
        """List all requests, newest first"""
        pass

    @abstractmethod
    async def list_by_requester(self, requester_id: UUID) -> List[AccessRequest]:
        """List a requester's requests, newest first"""
        pass

    @abstractmethod
    async def count_by_status(self, status: AccessRequestStatus) -> int:
        """Count requests in a given status"""
        pass

    @abstractmethod
    async def create(self, access_request: AccessRequest) -> AccessRequest:
        """Create a new access request"""
        pass

    @abstractmethod
    async def update(self, access_request: AccessRequest) -> AccessRequest:
        """Update existing access request"""
        pass
