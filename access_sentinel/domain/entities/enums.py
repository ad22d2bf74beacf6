"""
Sentinel Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AccountRole(str, Enum):
    """Account role"""

    admin = "admin"
    user = "user"


class AccessRequestStatus(str, Enum):
    """Access request lifecycle status"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    revoked = "revoked"


class NotificationType(str, Enum):
    """Kind of operator notification"""

    login = "login"
    logout = "logout"
    access_request = "access_request"
    info = "info"


class AdmissionOutcome(str, Enum):
    """Non-denied result of an admission attempt"""

    authenticated = "authenticated"
    two_factor_required = "two_factor_required"


class AuditAction(str, Enum):
    """Tagged audit actions. Never free text."""

    # Bootstrap and account administration
    admin_user_created = "admin_user_created"
    user_added = "user_added"
    user_updated = "user_updated"
    user_deleted = "user_deleted"
    account_admin_denied = "account_admin_denied"

    # Password login
    login_success_admin = "login_success_admin"
    login_success_user = "login_success_user"
    login_second_factor_required = "login_second_factor_required"
    login_fail_not_found = "login_fail_not_found"
    login_fail_blocked = "login_fail_blocked"
    login_fail_daily_limit = "login_fail_daily_limit"
    login_fail_credentials_blocked = "login_fail_credentials_blocked"
    login_fail_password = "login_fail_password"
    login_fail_os_block = "login_fail_os_block"
    login_fail_time_denied = "login_fail_time_denied"
    user_auto_unblocked = "user_auto_unblocked"
    logout_success = "logout_success"

    # Face login
    login_success_user_face_recognition = "login_success_user_face_recognition"
    face_login_fail_no_match = "face_login_fail_no_match"
    face_login_fail_blocked = "face_login_fail_blocked"
    face_login_fail_daily_limit = "face_login_fail_daily_limit"
    face_login_fail_os_block = "face_login_fail_os_block"
    face_login_fail_time_denied = "face_login_fail_time_denied"

    # Two-factor
    login_success_admin_2fa = "login_success_admin_2fa"
    login_fail_2fa_token = "login_fail_2fa_token"
    login_fail_2fa_not_enabled = "login_fail_2fa_not_enabled"
    admin_2fa_setup_started = "admin_2fa_setup_started"
    admin_2fa_setup_denied = "admin_2fa_setup_denied"
    admin_2fa_enabled = "admin_2fa_enabled"
    admin_2fa_confirm_failed = "admin_2fa_confirm_failed"
    admin_2fa_setup_expired = "admin_2fa_setup_expired"
    admin_2fa_disabled = "admin_2fa_disabled"
    admin_2fa_disable_failed = "admin_2fa_disable_failed"

    # Access requests
    file_access_request_sent = "file_access_request_sent"
    file_access_request_fail = "file_access_request_fail"
    request_approved = "request_approved"
    request_rejected = "request_rejected"
    request_revoked = "request_revoked"
    request_decision_denied = "request_decision_denied"
    request_decision_failed = "request_decision_failed"

    # Notifications
    admin_notifications_marked_read = "admin_notifications_marked_read"
