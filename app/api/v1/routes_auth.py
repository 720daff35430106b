# File: app/api/v1/routes_auth.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_password_hasher, get_token_service
from app.core.security import PasswordHasher, TokenService
from app.schemas.auth import AccessToken, LoginRequest
from app.services import auth_service

router = APIRouter()


@router.post(
    "/login",
    response_model=AccessToken,
    summary="Log in with email and password",
    responses={401: {"description": "Invalid credentials"}, 404: {"description": "Unknown email"}},
)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Exchange an email/password pair for a bearer access token.
    """
    return auth_service.login(
        db,
        email=payload.email,
        password=payload.password,
        hasher=hasher,
        tokens=tokens,
    )
