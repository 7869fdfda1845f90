import logging
import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes and newer releases reject longer input
BCRYPT_MAX_BYTES = 72

def _encode(password: str) -> bytes:
    return password.encode('utf-8')[:BCRYPT_MAX_BYTES]

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed_password.encode('utf-8'))
    except ValueError as e:
        # Malformed hash in storage
        logger.error(f"bcrypt error: {e}")
        return False

def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt()).decode('utf-8')
