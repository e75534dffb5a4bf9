"""User lookup and registration used by the auth endpoints."""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskflow.models import User


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def create_user(db: Session, name: str, email: str, password_hash: str) -> Optional[User]:
    """Create the user, or return ``None`` when the email is already registered."""
    if get_user_by_email(db, email) is not None:
        return None

    user = User(name=name, email=normalize_email(email), password_hash=password_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent registration took the email after the lookup above.
        db.rollback()
        return None
    db.refresh(user)
    return user
