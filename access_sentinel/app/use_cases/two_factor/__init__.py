"""
Two-Factor Use Cases

TOTP enrollment lifecycle for administrators.
"""

from .enroll_two_factor_use_case import EnrollTwoFactorUseCase
from .confirm_two_factor_use_case import ConfirmTwoFactorUseCase
from .disable_two_factor_use_case import DisableTwoFactorUseCase
from .get_two_factor_status_use_case import GetTwoFactorStatusUseCase
from .dtos import TwoFactorSetupResponse, TwoFactorStatusResponse

__all__ = [
    "EnrollTwoFactorUseCase",
    "ConfirmTwoFactorUseCase",
    "DisableTwoFactorUseCase",
    "GetTwoFactorStatusUseCase",
    "TwoFactorSetupResponse",
    "TwoFactorStatusResponse",
]
