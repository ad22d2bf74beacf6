"""
Use Cases

Organized into domain folders:
- auth/: Admission (password, face, two-factor verification) and logout
- two_factor/: TOTP enrollment lifecycle
- access_requests/: Access request ledger
- accounts/: Account administration
- audit/: Audit trail queries
- notifications/: Operator notification feed

Import from subdirectories for better organization.
"""

from .auth import (
    LoginUseCase,
    FaceLoginUseCase,
    VerifyTwoFactorUseCase,
    LogoutUseCase,
)
from .two_factor import (
    EnrollTwoFactorUseCase,
    ConfirmTwoFactorUseCase,
    DisableTwoFactorUseCase,
    GetTwoFactorStatusUseCase,
)
from .access_requests import (
    RequestAccessUseCase,
    DecideAccessRequestUseCase,
    ListAccessRequestsUseCase,
)
from .accounts import (
    AddAccountUseCase,
    UpdateAccountUseCase,
    DeleteAccountUseCase,
    ListAccountsUseCase,
)
from .audit import (
    ListAuditEventsUseCase,
    DailyActivityCountsUseCase,
    GetDashboardSummaryUseCase,
)
from .notifications import (
    ListNotificationsUseCase,
    AcknowledgeNotificationUseCase,
    AcknowledgeAllNotificationsUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "FaceLoginUseCase",
    "VerifyTwoFactorUseCase",
    "LogoutUseCase",
    # Two-factor
    "EnrollTwoFactorUseCase",
    "ConfirmTwoFactorUseCase",
    "DisableTwoFactorUseCase",
    "GetTwoFactorStatusUseCase",
    # Access requests
    "RequestAccessUseCase",
    "DecideAccessRequestUseCase",
    "ListAccessRequestsUseCase",
    # Accounts
    "AddAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
    "ListAccountsUseCase",
    # Audit
    "ListAuditEventsUseCase",
    "DailyActivityCountsUseCase",
    "GetDashboardSummaryUseCase",
    # Notifications
    "ListNotificationsUseCase",
    "AcknowledgeNotificationUseCase",
    "AcknowledgeAllNotificationsUseCase",
]
