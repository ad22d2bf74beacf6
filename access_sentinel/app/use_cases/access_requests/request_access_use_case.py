"""
Request Access Use Case

Files a pending access request for a protected resource.
"""

import logging
from typing import Optional
from uuid import UUID

from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AccessRequest, AuditAction, NotificationType
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .dtos import AccessRequestView

logger = logging.getLogger(__name__)


class RequestAccessUseCase:
    """
    Use case for submitting an access request.

    Business Rules:
    - Requester must exist (a missing requester is audited)
    - At most one pending/approved request per (requester, resource)
    - The duplicate check and the insert run under a per-pair lock
    - Emits file_access_request_sent and an access_request notification
    """

    def __init__(self, uow: UnitOfWork, clock: Clock, locks: AccountLocks):
        self.uow = uow
        self.clock = clock
        self.locks = locks

    async def execute(
        self,
        requester_id: UUID,
        resource_id: str,
        resource_name: Optional[str] = None,
    ) -> Result[AccessRequestView]:
        """
        Execute request access use case.

        Args:
            requester_id: Account UUID from JWT
            resource_id: Opaque identifier of the protected resource
            resource_name: Optional display label

        Returns:
            Result with AccessRequestView DTO, or Error
        """
        async with self.locks.hold(("access_request", requester_id, resource_id)):
            async with self.uow:
                audit = AuditLog(self.uow, self.clock)

                requester = await self.uow.accounts.get_by_id(requester_id)
                if requester is None:
                    await audit.record(
                        AuditAction.file_access_request_fail,
                        actor_id=requester_id,
                        actor_label="unknown",
                        details={
                            "resource_id": resource_id,
                            "reason": ErrorCode.NOT_FOUND.value,
                        },
                    )
                    await self.uow.commit()
                    return Return.err(Error(ErrorCode.NOT_FOUND, "Requester not found"))

                existing = await self.uow.access_requests.get_active(
                    requester_id, resource_id
                )
                if existing is not None:
                    await audit.record(
                        AuditAction.file_access_request_fail,
                        actor_id=requester.id,
                        actor_label=requester.email,
                        details={
                            "resource_id": resource_id,
                            "reason": ErrorCode.DUPLICATE_REQUEST.value,
                            "existing_status": existing.status,
                        },
                    )
                    await self.uow.commit()
                    logger.info(
                        f"Duplicate access request by {requester.email} for {resource_id}"
                    )
                    return Return.err(
                        Error(
                            ErrorCode.DUPLICATE_REQUEST,
                            f"A request for this resource is already {existing.status.value}",
                            {"existing_status": existing.status.value},
                        )
                    )

                access_request = AccessRequest(
                    requester_id=requester.id,
                    requester_email=requester.email,
                    resource_id=resource_id,
                    resource_name=resource_name,
                    requested_at=self.clock.now(),
                )
                await self.uow.access_requests.create(access_request)

                label = resource_name or resource_id
                await audit.record(
                    AuditAction.file_access_request_sent,
                    actor_id=requester.id,
                    actor_label=requester.email,
                    details={
                        "request_id": access_request.id,
                        "resource_id": resource_id,
                        "resource_name": resource_name,
                    },
                )
                await audit.notify(
                    f"User {requester.email} requested access to '{label}'.",
                    NotificationType.access_request,
                    {
                        "user_email": requester.email,
                        "request_id": access_request.id,
                        "resource_id": resource_id,
                    },
                )
                await self.uow.commit()

                return Return.ok(AccessRequestView.from_request(access_request))
