"""
Sentinel Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AccessRequestStatus,
    AccountRole,
    AdmissionOutcome,
    AuditAction,
    NotificationType,
)

# Export all entities
from .account import Account
from .access_request import AccessRequest
from .audit_event import AuditEvent
from .notification import Notification

__all__ = [
    # Enums
    "AccessRequestStatus",
    "AccountRole",
    "AdmissionOutcome",
    "AuditAction",
    "NotificationType",
    # Entities
    "Account",
    "AccessRequest",
    "AuditEvent",
    "Notification",
]
