from uuid import UUID

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import Account, AccountRole, AuditAction
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return


async def load_admin(
    uow: UnitOfWork, audit: AuditLog, actor_id: UUID, operation: str
) -> Result[Account]:
    """Resolve the acting account, auditing the attempt if it is not an admin."""
    actor = await uow.accounts.get_by_id(actor_id)
    if actor is not None and actor.role == AccountRole.admin:
        return Return.ok(actor)

    await audit.record(
        AuditAction.account_admin_denied,
        actor_id=actor_id,
        actor_label=actor.email if actor else "unknown",
        details={"operation": operation},
    )
    await uow.commit()
    return Return.err(
        Error(ErrorCode.UNAUTHORIZED, "Only admins can manage accounts")
    )
