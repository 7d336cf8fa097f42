"""
Password hashing for FoodShare.

Wraps bcrypt so the rest of the service only deals with str digests.
"""

import bcrypt

BCRYPT_ROUNDS = 10


def get_password_hash(password: str) -> str:
    """
    Hash a plaintext password with a fresh salt.

    Raises:
        ValueError: If bcrypt rejects the password (e.g. longer than 72 bytes).
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored bcrypt digest."""
    if not plain_password or not hashed_password:
        return False

    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # Malformed digest or over-long password
        return False
