# File: app/services/auth_service.py

"""
Authentication service.

login() runs three steps, each short-circuiting the next:
  - look up the user by email          -> UserNotFound
  - verify the password hash           -> InvalidCredentials
  - sign an access token {userId: id}
Nothing is written to the database.
"""

import logging

from sqlalchemy.orm import Session

from app.core.errors import InvalidCredentials, UserNotFound
from app.core.security import PasswordHasher, TokenService
from app.schemas.auth import AccessToken
from app.services.user_service import get_user_by_email

logger = logging.getLogger(__name__)


def login(
    db: Session,
    *,
    email: str,
    password: str,
    hasher: PasswordHasher,
    tokens: TokenService,
) -> AccessToken:
    user = get_user_by_email(db, email)
    if user is None:
        logger.info("Login failed: no user for email %s", email)
        raise UserNotFound(f"No user found for email {email}")

    if not hasher.verify(password, user.password):
        logger.info("Login failed: invalid credentials for user id=%s", user.id)
        raise InvalidCredentials()

    access_token = tokens.sign({"userId": user.id})
    logger.info("Login succeeded for user id=%s", user.id)
    return AccessToken(accessToken=access_token)
