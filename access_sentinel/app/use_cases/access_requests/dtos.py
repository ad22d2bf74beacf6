"""
Access Request Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from access_sentinel.domain.entities import AccessRequest


class AccessRequestView(BaseModel):
    """Access request as exposed outside the core"""

    id: str
    requester_id: str
    requester_email: str
    resource_id: str
    resource_name: Optional[str] = None
    status: str
    requested_at: datetime
    decided_at: Optional[datetime] = None
    decided_by: Optional[str] = None

    @classmethod
    def from_request(cls, access_request: AccessRequest) -> "AccessRequestView":
        return cls(
            id=str(access_request.id),
            requester_id=str(access_request.requester_id),
            requester_email=access_request.requester_email,
            resource_id=access_request.resource_id,
            resource_name=access_request.resource_name,
            status=access_request.status.value,
            requested_at=access_request.requested_at,
            decided_at=access_request.decided_at,
            decided_by=str(access_request.decided_by) if access_request.decided_by else None,
        )


class AccessRequestListResponse(BaseModel):
    """Response for list access requests use case"""

    requests: List[AccessRequestView]
