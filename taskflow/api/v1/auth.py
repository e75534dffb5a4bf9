"""Registration and login endpoints"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskflow import auth
from taskflow.database import get_db
from taskflow.errors import AuthenticationError, ConflictError
from taskflow.schemas import RegisterResponse, Token, UserLogin, UserRegister
from taskflow.services import users

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(user_in: UserRegister, db: Session = Depends(get_db)):
    """Create a user account."""
    user = users.create_user(
        db,
        name=user_in.name,
        email=user_in.email,
        password_hash=auth.get_password_hash(user_in.password),
    )
    if user is None:
        raise ConflictError("Email already exists.", code="EMAIL_EXISTS")

    logger.info("User registered", extra={"user_id": user.id})
    return RegisterResponse(message="User registered successfully.")


@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Exchange email and password for an access token."""
    user = users.get_user_by_email(db, credentials.email)
    # Same answer for unknown email and wrong password.
    if user is None or not auth.verify_password(credentials.password, user.password_hash):
        raise AuthenticationError("Invalid credentials.")

    return Token(token=auth.create_access_token(user.id, user.email))
