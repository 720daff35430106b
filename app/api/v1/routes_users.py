# File: app/api/v1/routes_users.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import RecordId, get_db, get_password_hasher
from app.api.guards import require_user
from app.core.errors import RecordNotFound
from app.core.security import PasswordHasher
from app.models.user import User
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services import user_service

router = APIRouter()

# Route-level gate for everything except sign-up
protected = [Depends(require_user)]


@router.post(
    "/",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    return user_service.create_user(db, payload, hasher=hasher)


@router.get(
    "/",
    response_model=list[UserRead],
    summary="List users",
    dependencies=protected,
)
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)


@router.get("/me", response_model=UserRead, summary="Current user")
def read_current_user(current_user: User = Depends(require_user)):
    """Return the user resolved from the bearer token."""
    return current_user


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get user",
    dependencies=protected,
)
def read_user(user_id: RecordId, db: Session = Depends(get_db)):
    user = user_service.get_user(db, user_id)
    if user is None:
        raise RecordNotFound(f"User with id {user_id} does not exist")
    return user


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    summary="Update user",
    dependencies=protected,
)
def update_user(
    user_id: RecordId,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Update profile fields. A supplied password is re-hashed before saving.
    """
    return user_service.update_user(db, user_id, payload, hasher=hasher)


@router.delete(
    "/{user_id}",
    response_model=UserRead,
    summary="Delete user",
    dependencies=protected,
)
def delete_user(user_id: RecordId, db: Session = Depends(get_db)):
    return user_service.delete_user(db, user_id)
