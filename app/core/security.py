# File: app/core/security.py

"""
Security primitives for the Articles API.

  - PasswordHasher: bcrypt hashing/verification with a configured cost
  - TokenService: signs and verifies stateless HMAC (HS256/384/512) JWTs

Both are built once from Settings at startup (see app.main) and are
read-only afterwards, so they can be shared across requests.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt
from pydantic import BaseModel, ValidationError

from app.core.config import MAX_HASH_ROUNDS, MIN_HASH_ROUNDS, SUPPORTED_JWT_ALGORITHMS, Settings
from app.core.errors import ConfigurationError, ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """One-way, salted password hashing with a tunable work factor."""

    def __init__(self, rounds: int):
        if isinstance(rounds, bool) or not isinstance(rounds, int):
            raise ConfigurationError("Hashing cost must be an integer")
        if not MIN_HASH_ROUNDS <= rounds <= MAX_HASH_ROUNDS:
            raise ConfigurationError(
                f"Hashing cost must be between {MIN_HASH_ROUNDS} and {MAX_HASH_ROUNDS}"
            )
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Check a plaintext password against a stored bcrypt hash.

        A stored value that is not a bcrypt hash, or a password bcrypt
        refuses (over 72 bytes), never matches.
        """
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            logger.warning("Password could not be checked against the stored credential")
            return False


class TokenClaims(BaseModel):
    """Verified JWT payload."""
    userId: int
    iat: int
    exp: Optional[int] = None


class TokenService:
    """Issues and validates bearer tokens signed with a server-held secret."""

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        expires_in: Optional[int] = None,
    ):
        if not secret:
            raise ConfigurationError("Token signing secret is not configured")
        if algorithm not in SUPPORTED_JWT_ALGORITHMS:
            raise ConfigurationError(f"Unsupported token algorithm {algorithm!r}")
        if expires_in is not None and expires_in <= 0:
            raise ConfigurationError("Token expiry must be a positive number of seconds")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def __repr__(self) -> str:
        return f"TokenService(algorithm={self.algorithm!r}, expires_in={self.expires_in!r})"

    def sign(self, claims: Dict[str, Any]) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = dict(claims)
        payload["iat"] = int(now.timestamp())
        if self.expires_in is not None:
            payload["exp"] = int((now + timedelta(seconds=self.expires_in)).timestamp())
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.

        The payload is only read after PyJWT has checked the signature
        (and the expiry, when the token carries one).
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError("Token has expired") from None
        except jwt.InvalidTokenError:
            raise InvalidTokenError("Invalid token") from None

        try:
            return TokenClaims(**payload)
        except (TypeError, ValidationError):
            raise InvalidTokenError("Token is missing a valid userId claim") from None


def build_password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(settings.rounds_of_hashing)


def build_token_service(settings: Settings) -> TokenService:
    return TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=settings.jwt_expires_in,
    )
