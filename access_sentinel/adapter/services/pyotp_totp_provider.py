from datetime import datetime

import pyotp

from access_sentinel.app.services.totp_provider import ITotpProvider


class PyOtpTotpProvider(ITotpProvider):
    """RFC 6238 codes via pyotp (30 second step, 6 digits)"""

    def generate_secret(self) -> str:
        return pyotp.random_base32()

    def provisioning_uri(self, secret: str, account_name: str, issuer: str) -> str:
        return pyotp.TOTP(secret).provisioning_uri(name=account_name, issuer_name=issuer)

    def verify(self, secret: str, token: str, at: datetime, valid_window: int = 1) -> bool:
        token = (token or "").strip()
        if not token.isdigit():
            return False
        return pyotp.TOTP(secret).verify(token, for_time=at, valid_window=valid_window)
