import logging
import bcrypt
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from app.core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of the input
BCRYPT_MAX_BYTES = 72

# Used to verify hashes that were not produced by bcrypt directly
try:
    pwd_context = CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
    )
    logger.debug("Password context initialized")
except Exception as e:
    logger.warning(f"Failed to initialize passlib context: {e}, using bcrypt directly")
    pwd_context = None


def _truncate(password: str) -> bytes:
    """Encode a password and cut it to bcrypt's 72-byte limit on a character boundary."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= BCRYPT_MAX_BYTES:
        return password_bytes

    logger.warning("Password exceeds 72 bytes, truncating before hashing (validation should have caught this)")
    return password_bytes[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore").encode("utf-8")


def hash_password(password: str) -> str:
    """
    Hash a password with a fresh bcrypt salt.

    Args:
        password: Plain text password (max 72 bytes in UTF-8)

    Returns:
        Hashed password string (bcrypt format compatible with passlib)

    Raises:
        ValueError: If the password cannot be hashed
    """
    try:
        return bcrypt.hashpw(_truncate(password), bcrypt.gensalt()).decode("utf-8")
    except Exception as e:
        logger.error(f"Password hashing failed: {type(e).__name__}", exc_info=True)
        raise ValueError("Invalid password") from e


def verify_password(password: str, hashed: str) -> bool:
    """
    Verify a password against its hash.

    Returns False instead of raising on malformed hashes.
    """
    try:
        try:
            return bcrypt.checkpw(_truncate(password), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            if pwd_context:
                return pwd_context.verify(password, hashed)
            return False
    except Exception as e:
        logger.error(f"Password verification failed: {type(e).__name__}", exc_info=True)
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Return the token claims, or None when the signature is bad or the token expired."""
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.debug(f"Rejected session token: {e}")
        return None
