from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from app.core.config import SESSION_COOKIE_NAME
from app.core.security import decode_access_token
from app.db.session import SessionLocal
from app.db.models.user import User

# auto_error=False so the session cookie can be used instead of the header
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _unauthorized(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def get_current_user_id(
    request: Request,
    bearer_token: Optional[str] = Depends(oauth2_scheme),
) -> int:
    """Get the user id from the session cookie or, failing that, the bearer token."""
    token = request.cookies.get(SESSION_COOKIE_NAME) or bearer_token
    if not token:
        raise _unauthorized()

    payload = decode_access_token(token)
    if payload is None:
        raise _unauthorized("Invalid or expired session")

    user_id = payload.get("sub")
    if user_id is None:
        raise _unauthorized("Invalid or expired session")

    try:
        return int(user_id)
    except (TypeError, ValueError):
        raise _unauthorized("Invalid or expired session")


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Get current User object from the session."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise _unauthorized("User no longer exists")
    return user
