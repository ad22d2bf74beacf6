import pytest

from access_sentinel.app.services.credentials import (
    burn_credential_check,
    credential_too_long,
    hash_credential,
    verify_credential,
)


@pytest.mark.parametrize(
    "secret, too_long",
    [
        ("x" * 72, False),
        ("x" * 73, True),
        ("é" * 36, False),
        ("é" * 37, True),
    ],
)
def test_length_is_counted_in_utf8_bytes(secret, too_long):
    assert credential_too_long(secret) is too_long


def test_overlong_secret_never_verifies():
    stored = hash_credential("x" * 72, rounds=4)

    assert verify_credential("x" * 72, stored) is True
    assert verify_credential("x" * 73, stored) is False


def test_burn_accepts_overlong_secret():
    burn_credential_check("x" * 500)


def test_malformed_hash_never_verifies():
    assert verify_credential("secret", "not-a-bcrypt-hash") is False
