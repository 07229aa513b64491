"""
Auth endpoints: signup, login, logout and the current user.

The session token is a signed JWT carrying the user id and email. It is set
as an HTTP-only cookie and also returned in the body for API clients.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core import config
from app.core.auth_dependency import get_db, get_current_user
from app.core.logging_config import sanitize_log_data
from app.core.rate_limit import auth_rate_limit
from app.core.security import hash_password, verify_password, create_access_token
from app.db.models.user import User
from app.db.models.user_auth import UserAuth
from app.schemas.auth import SignupRequest, LoginRequest, AuthResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

INVALID_CREDENTIALS = "Invalid email or password"


def _issue_session(response: Response, user: User) -> AuthResponse:
    token = create_access_token({"sub": str(user.id), "email": user.email})
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite="lax",
        max_age=config.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        path="/",
    )
    return AuthResponse(access_token=token, user=UserResponse.model_validate(user))


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    dependencies=[Depends(auth_rate_limit)],
)
def signup(
    payload: SignupRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    email = payload.email.lower()

    existing = db.query(UserAuth).filter(UserAuth.email == email).first()
    if existing:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    try:
        hashed = hash_password(payload.password)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid password")

    try:
        user = User(
            email=email,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        db.add(user)
        db.flush()

        db.add(UserAuth(user_id=user.id, email=email, hashed_password=hashed))
        db.commit()
        db.refresh(user)
    except IntegrityError:
        # A concurrent signup committed the same email first
        db.rollback()
        logger.warning("Signup conflict: email registered concurrently")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    except Exception:
        db.rollback()
        logger.error("Signup failed", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create account"
        )

    logger.info(f"User signed up: user_id={user.id}")
    return _issue_session(response, user)


@router.post("/login", response_model=AuthResponse, dependencies=[Depends(auth_rate_limit)])
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    email = payload.email.lower()
    credential = db.query(UserAuth).filter(UserAuth.email == email).first()

    # Unknown email and wrong password produce the same error
    if not credential or not verify_password(payload.password, credential.hashed_password):
        attempt = sanitize_log_data({"email": email, "password": payload.password})
        logger.warning(f"Login failed: invalid credentials {attempt}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    user = credential.user
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    logger.info(f"User logged in: user_id={user.id}")
    return _issue_session(response, user)


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(config.SESSION_COOKIE_NAME, path="/")
    return {"message": "Logged out successfully"}


@router.get("/user", response_model=UserResponse)
def current_user(user: User = Depends(get_current_user)):
    return user
