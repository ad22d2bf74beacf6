"""
Decide Access Request Use Case

Moves an access request along its lifecycle.
"""

from uuid import UUID

from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import (
    AccessRequestStatus,
    AccountRole,
    AuditAction,
)
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .dtos import AccessRequestView

ALLOWED_TRANSITIONS = {
    AccessRequestStatus.pending: {AccessRequestStatus.approved, AccessRequestStatus.rejected},
    AccessRequestStatus.approved: {AccessRequestStatus.revoked},
}


def can_transition(current: AccessRequestStatus, target: AccessRequestStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, set())


class DecideAccessRequestUseCase:
    """
    Use case for approving, rejecting or revoking an access request.

    Business Rules:
    - Only admins decide
    - pending -> approved | rejected, approved -> revoked
    - rejected and revoked are terminal
    - Records request_{decision} with the previous status
    - Failed decisions are recorded as request_decision_failed with the reason
    """

    def __init__(self, uow: UnitOfWork, clock: Clock, locks: AccountLocks):
        self.uow = uow
        self.clock = clock
        self.locks = locks

    async def execute(
        self, request_id: UUID, decision: str, actor_id: UUID
    ) -> Result[AccessRequestView]:
        async with self.locks.hold(("access_request", request_id)):
            async with self.uow:
                audit = AuditLog(self.uow, self.clock)

                actor = await self.uow.accounts.get_by_id(actor_id)
                if actor is None or actor.role != AccountRole.admin:
                    await audit.record(
                        AuditAction.request_decision_denied,
                        actor_id=actor.id if actor else actor_id,
                        actor_label=actor.email if actor else "unknown",
                        details={"request_id": request_id, "decision": decision},
                    )
                    await self.uow.commit()
                    return Return.err(
                        Error(ErrorCode.UNAUTHORIZED, "Only admins can decide access requests")
                    )

                try:
                    target = AccessRequestStatus(decision)
                except ValueError:
                    return await self._fail(
                        audit,
                        actor,
                        request_id,
                        decision,
                        Error(
                            ErrorCode.INVALID_TRANSITION,
                            f"Invalid decision: {decision}. "
                            "Must be one of: approved, rejected, revoked",
                        ),
                    )

                access_request = await self.uow.access_requests.get_by_id(request_id)
                if access_request is None:
                    return await self._fail(
                        audit,
                        actor,
                        request_id,
                        decision,
                        Error(ErrorCode.NOT_FOUND, "Access request not found"),
                    )

                previous_status = access_request.status
                if not can_transition(previous_status, target):
                    return await self._fail(
                        audit,
                        actor,
                        request_id,
                        decision,
                        Error(
                            ErrorCode.INVALID_TRANSITION,
                            f"Cannot move request from {previous_status.value} to {target.value}",
                            {"current_status": previous_status.value},
                        ),
                    )

                access_request.status = target
                access_request.decided_at = self.clock.now()
                access_request.decided_by = actor.id
                await self.uow.access_requests.update(access_request)

                await audit.record(
                    AuditAction(f"request_{target.value}"),
                    actor_id=actor.id,
                    actor_label=actor.email,
                    details={
                        "request_id": access_request.id,
                        "requester_email": access_request.requester_email,
                        "resource_id": access_request.resource_id,
                        "previous_status": previous_status,
                    },
                )
                await self.uow.commit()

                return Return.ok(AccessRequestView.from_request(access_request))

    async def _fail(
        self, audit: AuditLog, actor, request_id: UUID, decision: str, error: Error
    ) -> Result[AccessRequestView]:
        details = {
            "request_id": request_id,
            "decision": decision,
            "reason": error.code.value,
        }
        if error.details:
            details.update(error.details)
        await audit.record(
            AuditAction.request_decision_failed,
            actor_id=actor.id,
            actor_label=actor.email,
            details=details,
        )
        await self.uow.commit()
        return Return.err(error)
