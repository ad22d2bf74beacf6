import bcrypt

# bcrypt only reads the first 72 bytes of a secret
MAX_CREDENTIAL_BYTES = 72

# Precomputed hash used to keep unknown-email lookups as slow as real checks
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


def credential_too_long(secret: str) -> bool:
    return len(secret.encode()) > MAX_CREDENTIAL_BYTES


def hash_credential(secret: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(secret.encode(), bcrypt.gensalt(rounds)).decode()


def verify_credential(secret: str, credential_hash: str) -> bool:
    """Constant-time comparison of a submitted secret against a stored hash."""
    if credential_too_long(secret):
        # No stored credential can be this long
        burn_credential_check(secret)
        return False
    try:
        return bcrypt.checkpw(secret.encode(), credential_hash.encode())
    except ValueError:
        # Malformed stored hash never matches
        return False


def burn_credential_check(secret: str) -> None:
    bcrypt.checkpw(secret.encode()[:MAX_CREDENTIAL_BYTES], _DUMMY_HASH)
