"""
Two-Factor Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class TwoFactorSetupResponse(BaseModel):
    """Response for enroll two-factor use case.

    The client renders provisioning_uri as a QR code.
    """

    secret: str
    provisioning_uri: str
    expires_at: datetime


class TwoFactorStatusResponse(BaseModel):
    """Response for two-factor status and confirm/disable use cases"""

    enabled: bool
    enrollment_pending: bool = False
    enrollment_expires_at: Optional[datetime] = None
