# File: app/services/user_service.py

"""
User directory and user CRUD.

Lookups (get_user, get_user_by_email) return None when nothing matches and
leave the error semantics to the caller. Mutations take a PasswordHasher so
a plaintext password is hashed before it ever reaches the session.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import RecordNotFound
from app.core.security import PasswordHasher
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalars(select(User).where(User.email == email)).first()


def list_users(db: Session) -> list[User]:
    return list(db.scalars(select(User).order_by(User.id)))


def create_user(db: Session, payload: UserCreate, *, hasher: PasswordHasher) -> User:
    data = payload.model_dump()
    data["password"] = hasher.hash(data["password"])
    user = User(**data)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user(
    db: Session,
    user_id: int,
    payload: UserUpdate,
    *,
    hasher: PasswordHasher,
) -> User:
    user = get_user(db, user_id)
    if user is None:
        raise RecordNotFound(f"User with id {user_id} does not exist")

    data = payload.model_dump(exclude_unset=True)
    if data.get("password") is not None:
        data["password"] = hasher.hash(data["password"])
    else:
        data.pop("password", None)
    # email is non-nullable; an explicit null leaves it unchanged
    if data.get("email", "") is None:
        del data["email"]

    for field, value in data.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> User:
    user = get_user(db, user_id)
    if user is None:
        raise RecordNotFound(f"User with id {user_id} does not exist")
    db.delete(user)
    db.commit()
    return user
