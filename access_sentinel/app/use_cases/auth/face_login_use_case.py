"""
Face Login Use Case

Admission of user accounts by face embedding instead of email + password.
"""

from typing import Sequence

from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.audit_log import AuditLog
from access_sentinel.app.services.clock import Clock
from access_sentinel.app.services.embedding_matcher import IEmbeddingMatcher
from access_sentinel.app.services.unit_of_work import UnitOfWork
from access_sentinel.domain.entities import AccountRole, AuditAction
from access_sentinel.domain.errors import ErrorCode
from access_sentinel.libs.result import Error, Result, Return

from .admission import FACE_LOGIN, AdmissionGate
from .dtos import AdmissionResponse


class FaceLoginUseCase:
    """
    Use case for face-recognition login.

    Business Rules:
    - Identity comes from the best embedding match (no password check)
    - Day rollover, auto-unblock, block and daily quota checks still apply
    - No second factor on this path
    - OS allow-list and login window apply as for password login
    - The returned session never includes the face embedding
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock,
        locks: AccountLocks,
        matcher: IEmbeddingMatcher,
    ):
        self.uow = uow
        self.clock = clock
        self.locks = locks
        self.matcher = matcher

    async def execute(
        self, probe_embedding: Sequence[float], client_os: str
    ) -> Result[AdmissionResponse]:
        async with self.uow:
            audit = AuditLog(self.uow, self.clock)

            candidates = await self.uow.accounts.list_face_candidates()
            matched = self.matcher.match(probe_embedding, candidates)

            if matched is None:
                await audit.record(
                    AuditAction.face_login_fail_no_match,
                    actor_label="unknown_face_user",
                    details={
                        "client_os": client_os,
                        "reason": ErrorCode.NOT_FOUND.value,
                        "candidates": len(candidates),
                    },
                )
                await self.uow.commit()
                return Return.err(Error(ErrorCode.NOT_FOUND, "No matching face found"))

            matched_id = matched.id
            await self.uow.rollback()

            async with self.locks.hold(matched_id):
                account = await self.uow.accounts.get_for_update(matched_id)
                if account is None or account.role != AccountRole.user:
                    return Return.err(Error(ErrorCode.NOT_FOUND, "No matching face found"))

                gate = AdmissionGate(self.uow, audit, self.clock)

                denial = await gate.check_lockout(account, client_os, FACE_LOGIN)
                if denial is not None:
                    return denial

                denial = await gate.check_client_environment(account, client_os, FACE_LOGIN)
                if denial is not None:
                    return denial

                return await gate.admit(
                    account,
                    client_os,
                    AuditAction.login_success_user_face_recognition,
                    method="face_recognition",
                )
