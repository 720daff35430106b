# File: app/api/guards.py

"""
Access guard for protected routes.

A request passes through an ordered list of gates:

    extract_bearer_token -> verify_bearer_token -> resolve_identity

Each gate takes a GuardContext and returns it advanced by one step, or
raises Unauthorized, which stops the chain. The user is looked up again
on every request, so tokens of deleted users stop working immediately.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_token_service
from app.core.errors import ExpiredTokenError, InvalidTokenError, Unauthorized
from app.core.security import TokenClaims, TokenService
from app.models.user import User
from app.services.user_service import get_user

logger = logging.getLogger(__name__)

# Only used to advertise the bearer scheme in the OpenAPI docs;
# header parsing happens in extract_bearer_token.
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class GuardContext:
    authorization: Optional[str]
    db: Session
    tokens: TokenService
    token: Optional[str] = None
    claims: Optional[TokenClaims] = None
    user: Optional[User] = None


Gate = Callable[[GuardContext], GuardContext]


def extract_bearer_token(ctx: GuardContext) -> GuardContext:
    if not ctx.authorization:
        raise Unauthorized("Not authenticated")
    scheme, _, token = ctx.authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise Unauthorized("Malformed Authorization header")
    return replace(ctx, token=token)


def verify_bearer_token(ctx: GuardContext) -> GuardContext:
    try:
        claims = ctx.tokens.verify(ctx.token)
    except ExpiredTokenError:
        raise Unauthorized("Token has expired") from None
    except InvalidTokenError:
        raise Unauthorized("Invalid token") from None
    return replace(ctx, claims=claims)


def resolve_identity(ctx: GuardContext) -> GuardContext:
    user = get_user(ctx.db, ctx.claims.userId)
    if user is None:
        raise Unauthorized("User no longer exists")
    return replace(ctx, user=user)


class AccessGuard:
    def __init__(self, gates: Sequence[Gate]):
        self.gates = tuple(gates)

    def __call__(self, ctx: GuardContext) -> User:
        try:
            for gate in self.gates:
                ctx = gate(ctx)
        except Unauthorized as exc:
            logger.info("Request rejected by access guard: %s", exc.detail)
            raise
        if ctx.user is None:
            raise Unauthorized()
        return ctx.user


access_guard = AccessGuard([extract_bearer_token, verify_bearer_token, resolve_identity])


def require_user(
    request: Request,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    _bearer: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> User:
    """
    FastAPI dependency for protected routes.

    Runs the access guard and attaches the resolved user to
    request.state.user for downstream handlers.
    """
    ctx = GuardContext(
        authorization=request.headers.get("Authorization"),
        db=db,
        tokens=tokens,
    )
    user = access_guard(ctx)
    request.state.user = user
    return user
