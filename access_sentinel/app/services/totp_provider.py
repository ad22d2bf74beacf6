from abc import ABC, abstractmethod
from datetime import datetime


class ITotpProvider(ABC):
    """Time-based one-time password capability - application layer"""

    @abstractmethod
    def generate_secret(self) -> str:
        """Generate a new base32 shared secret"""
        pass

    @abstractmethod
    def provisioning_uri(self, secret: str, account_name: str, issuer: str) -> str:
        """Build the otpauth:// URI rendered as a QR code by the client"""
        pass

    @abstractmethod
    def verify(self, secret: str, token: str, at: datetime, valid_window: int = 1) -> bool:
        """Verify a token at the given instant, tolerating +/- valid_window steps"""
        pass
