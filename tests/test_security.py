# File: tests/test_security.py

import time

import jwt
import pytest

from app.core.errors import ConfigurationError, ExpiredTokenError, InvalidTokenError
from app.core.security import PasswordHasher, TokenService


# -----------------------------
# PASSWORD HASHER
# -----------------------------
def test_hash_is_salted_per_call():
    hasher = PasswordHasher(4)
    first = hasher.hash("secret123")
    second = hasher.hash("secret123")

    assert first != second
    assert hasher.verify("secret123", first)
    assert hasher.verify("secret123", second)


def test_hash_never_contains_plaintext():
    hasher = PasswordHasher(4)
    hashed = hasher.hash("secret123")
    assert "secret123" not in hashed
    assert hashed.startswith("$2b$04$")


def test_verify_rejects_wrong_password():
    hasher = PasswordHasher(4)
    assert not hasher.verify("wrong", hasher.hash("secret123"))


def test_verify_does_not_fall_back_to_plaintext_equality():
    hasher = PasswordHasher(4)
    # A row holding a plaintext password must not authenticate
    assert not hasher.verify("secret123", "secret123")


def test_hashes_verify_across_cost_settings():
    hashed = PasswordHasher(5).hash("secret123")
    assert PasswordHasher(4).verify("secret123", hashed)


@pytest.mark.parametrize("rounds", [0, 3, 32, "10", None, True])
def test_invalid_cost_is_a_configuration_error(rounds):
    with pytest.raises(ConfigurationError):
        PasswordHasher(rounds)


# -----------------------------
# TOKEN SERVICE
# -----------------------------
def test_sign_and_verify_round_trip():
    tokens = TokenService("s1")
    claims = tokens.verify(tokens.sign({"userId": 42}))

    assert claims.userId == 42
    assert claims.iat <= int(time.time())
    assert claims.exp is None


def test_expiry_is_added_when_configured():
    tokens = TokenService("s1", expires_in=300)
    claims = tokens.verify(tokens.sign({"userId": 1}))
    assert claims.exp == claims.iat + 300


@pytest.mark.parametrize("user_id", [1, 7, 123456])
def test_token_from_other_secret_is_rejected(user_id):
    token = TokenService("s1").sign({"userId": user_id})
    with pytest.raises(InvalidTokenError):
        TokenService("s2").verify(token)


def test_expired_token_is_rejected():
    past = int(time.time()) - 120
    token = jwt.encode({"userId": 1, "iat": past - 60, "exp": past}, "s1", algorithm="HS256")

    with pytest.raises(ExpiredTokenError):
        TokenService("s1").verify(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c", "eyJhbGciOiJIUzI1NiJ9..sig"])
def test_malformed_token_is_rejected(token):
    with pytest.raises(InvalidTokenError):
        TokenService("s1").verify(token)


def test_tampered_payload_is_rejected():
    tokens = TokenService("s1")
    header, _, signature = tokens.sign({"userId": 1}).split(".")
    forged_payload = jwt.encode({"userId": 2, "iat": int(time.time())}, "other", algorithm="HS256").split(".")[1]

    with pytest.raises(InvalidTokenError):
        tokens.verify(f"{header}.{forged_payload}.{signature}")


def test_unsigned_token_is_rejected():
    token = jwt.encode({"userId": 1, "iat": int(time.time())}, None, algorithm="none")
    with pytest.raises(InvalidTokenError):
        TokenService("s1").verify(token)


@pytest.mark.parametrize(
    "payload",
    [
        {"iat": 1},
        {"userId": "abc", "iat": 1},
        {"userId": 1},
    ],
)
def test_token_without_valid_claims_is_rejected(payload):
    token = jwt.encode(payload, "s1", algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        TokenService("s1").verify(token)


def test_empty_secret_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        TokenService("")


def test_repr_does_not_expose_secret():
    assert "s3cr3t" not in repr(TokenService("s3cr3t"))


@pytest.mark.parametrize("algorithm", ["none", "RS256", "bogus"])
def test_unsupported_algorithm_is_a_configuration_error(algorithm):
    with pytest.raises(ConfigurationError):
        TokenService("s1", algorithm=algorithm)


@pytest.mark.parametrize("algorithm", ["HS384", "HS512"])
def test_other_hmac_algorithms_round_trip(algorithm):
    tokens = TokenService("s1", algorithm=algorithm)
    token = tokens.sign({"userId": 3})
    assert jwt.get_unverified_header(token)["alg"] == algorithm
    assert tokens.verify(token).userId == 3
