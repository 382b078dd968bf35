# archive_api/core/security.py
import bcrypt

from archive_api.core.config import PASSWORD_HASH_ROUNDS

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Returns a salted bcrypt hash of the password, as text for storage.
    """
    hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=PASSWORD_HASH_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False
