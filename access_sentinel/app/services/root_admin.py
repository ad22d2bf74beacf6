"""
Root administrator bootstrap.

The root admin is created lazily, the first time its email is looked up
during login, so a fresh database is always administrable.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.credentials import hash_credential
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import (
    Account,
    AccountRole,
    AuditAction,
    NotificationType,
)

logger = logging.getLogger(__name__)

ROOT_ADMIN_MAX_ATTEMPTS = 999


@dataclass(frozen=True)
class RootAdminSettings:
    email: str
    password: str
    name: str = "Root Administrator"
    bcrypt_rounds: int = 12


class RootAdminBootstrap:
    def __init__(self, uow: UnitOfWork, audit: AuditLog, settings: RootAdminSettings):
        self.uow = uow
        self.audit = audit
        self.settings = settings

    def is_root_email(self, email: str) -> bool:
        return email.strip().lower() == self.settings.email.strip().lower()

    async def ensure(self, email: str) -> Optional[Account]:
        """Create the root admin if ``email`` is its address and it is absent.

        Returns the newly created account, or None when nothing was created.
        """
        if not self.is_root_email(email):
            return None
        if await self.uow.accounts.get_by_email(self.settings.email.strip().lower()) is not None:
            return None

        account = Account(
            name=self.settings.name,
            email=self.settings.email.strip().lower(),
            credential_hash=hash_credential(
                self.settings.password, self.settings.bcrypt_rounds
            ),
            role=AccountRole.admin,
            is_root_admin=True,
            max_attempts_per_day=ROOT_ADMIN_MAX_ATTEMPTS,
            created_at=self.audit.clock.now(),
            last_attempt_date=self.audit.clock.today(),
        )
        account = await self.uow.accounts.create(account)
        logger.info(f"Root admin account {account.email} bootstrapped")

        await self.audit.record(
            AuditAction.admin_user_created,
            actor_id=account.id,
            actor_label=account.email,
        )
        await self.audit.notify(
            f"Primary admin account {account.email} ensured/created.",
            NotificationType.info,
            {"admin_email": account.email},
        )
        return account
