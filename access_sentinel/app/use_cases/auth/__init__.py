"""
Authentication Use Cases

Admission control: password login, face login, second factor and logout.
"""

from .login_use_case import LoginUseCase
from .face_login_use_case import FaceLoginUseCase
from .verify_two_factor_use_case import VerifyTwoFactorUseCase
from .logout_use_case import LogoutUseCase
from .admission import AdmissionGate
from .dtos import (
    AccountSession,
    AccountSummary,
    AdmissionResponse,
    LogoutResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "FaceLoginUseCase",
    "VerifyTwoFactorUseCase",
    "LogoutUseCase",
    # Shared admission steps
    "AdmissionGate",
    # DTOs - Responses
    "AdmissionResponse",
    "LogoutResponse",
    # DTOs - Nested Models
    "AccountSession",
    "AccountSummary",
]
