from datetime import UTC, datetime, timedelta

import pyotp

from access_sentinel.adapter.services.pyotp_totp_provider import PyOtpTotpProvider

AT = datetime(2025, 3, 10, 12, 0, 15, tzinfo=UTC)


def test_generated_secret_is_base32():
    secret = PyOtpTotpProvider().generate_secret()

    assert len(secret) == 32
    pyotp.TOTP(secret).now()


def test_verify_tolerates_one_step():
    provider = PyOtpTotpProvider()
    secret = provider.generate_secret()
    totp = pyotp.TOTP(secret)

    assert provider.verify(secret, totp.at(AT), AT)
    assert provider.verify(secret, totp.at(AT - timedelta(seconds=30)), AT)
    assert provider.verify(secret, totp.at(AT + timedelta(seconds=30)), AT)


def test_verify_rejects_garbage():
    provider = PyOtpTotpProvider()
    secret = provider.generate_secret()

    assert not provider.verify(secret, "", AT)
    assert not provider.verify(secret, "abcdef", AT)


def test_provisioning_uri_names_account_and_issuer():
    uri = PyOtpTotpProvider().provisioning_uri("JBSWY3DPEHPK3PXP", "ada@example.com", "Sentinel")

    assert uri.startswith("otpauth://totp/Sentinel:ada")
    assert "secret=JBSWY3DPEHPK3PXP" in uri
    assert "issuer=Sentinel" in uri
