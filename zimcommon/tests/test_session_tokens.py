from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
from jwt.utils import base64url_encode
import pytest

from zimcommon.application.services.session_tokens import SessionTokenService
from zimcommon.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    SigningKeyMissingError,
)
from zimcommon.shared.config import AuthConfig
from zimcommon.tests.conftest import TEST_SECRET, FakeClock


@pytest.fixture()
def clocked_tokens(auth_config: AuthConfig, clock: FakeClock) -> SessionTokenService:
    return SessionTokenService(auth_config, clock=clock)


def _flip(char: str) -> str:
    return "A" if char != "A" else "B"


def test_issue_then_verify_returns_subject(
    clocked_tokens: SessionTokenService, clock: FakeClock
) -> None:
    token = clocked_tokens.issue("42")

    claims = clocked_tokens.verify(token)

    assert claims.subject == "42"
    assert claims.issued_at == clock.now
    assert claims.expires_at == clock.now + timedelta(days=7)


def test_integer_subject_is_stored_as_string(clocked_tokens: SessionTokenService) -> None:
    token = clocked_tokens.issue(7)

    assert clocked_tokens.verify(token).subject == "7"
    assert jwt.decode(token, options={"verify_signature": False})["sub"] == "7"


def test_token_carries_standard_claims(
    clocked_tokens: SessionTokenService, clock: FakeClock
) -> None:
    payload = jwt.decode(clocked_tokens.issue("1"), options={"verify_signature": False})

    assert set(payload) == {"sub", "iat", "exp"}
    assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60
    assert payload["iat"] == int(clock.now.timestamp())


def test_token_ttl_follows_config(clock: FakeClock) -> None:
    config = AuthConfig(JWT_SECRET=TEST_SECRET, TOKEN_TTL_DAYS=1)
    service = SessionTokenService(config, clock=clock)

    claims = service.verify(service.issue("1"))

    assert service.ttl == timedelta(days=1)
    assert claims.expires_at - claims.issued_at == timedelta(days=1)


def test_token_valid_one_second_before_expiry(
    clocked_tokens: SessionTokenService, clock: FakeClock
) -> None:
    token = clocked_tokens.issue("1")
    clock.advance(timedelta(days=7) - timedelta(seconds=1))

    assert clocked_tokens.verify(token).subject == "1"


@pytest.mark.parametrize("past_expiry", [timedelta(0), timedelta(seconds=1), timedelta(days=30)])
def test_token_rejected_at_and_after_expiry(
    clocked_tokens: SessionTokenService, clock: FakeClock, past_expiry: timedelta
) -> None:
    token = clocked_tokens.issue("1")
    clock.advance(timedelta(days=7) + past_expiry)

    with pytest.raises(ExpiredTokenError) as excinfo:
        clocked_tokens.verify(token)

    assert excinfo.value.code == "token_expired"
    assert excinfo.value.status == 403


def test_tampered_payload_is_rejected(clocked_tokens: SessionTokenService) -> None:
    header, _, signature = clocked_tokens.issue("1").split(".")
    forged = base64url_encode(b'{"sub":"2","iat":1740830400,"exp":4102444800}')

    with pytest.raises(InvalidTokenError):
        clocked_tokens.verify(f"{header}.{forged.decode()}.{signature}")


def test_tampered_signature_is_rejected(clocked_tokens: SessionTokenService) -> None:
    header, payload, signature = clocked_tokens.issue("1").split(".")
    tampered = _flip(signature[0]) + signature[1:]

    with pytest.raises(InvalidTokenError):
        clocked_tokens.verify(f"{header}.{payload}.{tampered}")


def test_token_signed_with_other_key_is_rejected(clock: FakeClock) -> None:
    other = SessionTokenService(
        AuthConfig(JWT_SECRET="another-signing-key-fedcba9876543210"), clock=clock
    )
    ours = SessionTokenService(AuthConfig(JWT_SECRET=TEST_SECRET), clock=clock)

    with pytest.raises(InvalidTokenError):
        ours.verify(other.issue("1"))


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer x.y.z"])
def test_malformed_tokens_are_rejected(clocked_tokens: SessionTokenService, token: str) -> None:
    with pytest.raises(InvalidTokenError) as excinfo:
        clocked_tokens.verify(token)

    assert excinfo.value.code == "invalid_token"
    assert excinfo.value.status == 403


@pytest.mark.parametrize(
    "payload",
    [
        {"sub": "1", "iat": 1740830400},
        {"iat": 1740830400, "exp": 4102444800},
        {"sub": "", "iat": 1740830400, "exp": 4102444800},
    ],
)
def test_tokens_missing_claims_are_rejected(
    clocked_tokens: SessionTokenService, payload: dict[str, object]
) -> None:
    token = jwt.encode(payload, TEST_SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        clocked_tokens.verify(token)


def test_unsigned_token_is_rejected(clocked_tokens: SessionTokenService) -> None:
    token = jwt.encode(
        {"sub": "1", "iat": 1740830400, "exp": 4102444800}, key=None, algorithm="none"
    )

    with pytest.raises(InvalidTokenError):
        clocked_tokens.verify(token)


def test_default_clock_is_wall_clock(tokens: SessionTokenService) -> None:
    claims = tokens.verify(tokens.issue("1"))

    assert abs(claims.issued_at - datetime.now(UTC)) < timedelta(minutes=1)


@pytest.mark.parametrize("secret", [None, ""])
def test_missing_signing_key_fails_construction(secret: str | None) -> None:
    with pytest.raises(SigningKeyMissingError):
        SessionTokenService(AuthConfig(JWT_SECRET=secret))
