"""Tests for reading the caller's identity from the bearer token."""

import base64
import json

import pytest
from fastapi import HTTPException

from pet_registry.presentation.dependencies.auth import extract_user_id


def _segment(payload) -> str:
    raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def _unsigned(claims) -> str:
    return f"{_segment({'alg': 'none', 'typ': 'JWT'})}.{_segment(claims)}.sig"


def test_reads_user_id_claim(token_factory):
    assert extract_user_id(token_factory("user-789")) == "user-789"


def test_signature_is_not_checked():
    assert extract_user_id(_unsigned({"user_id": "user-123"})) == "user-123"


def test_numeric_user_id_is_stringified():
    assert extract_user_id(_unsigned({"user_id": 42})) == "42"


@pytest.mark.parametrize(
    "token, detail",
    [
        ("", "Missing or invalid Authorization header"),
        ("   ", "Missing or invalid Authorization header"),
        ("not-a-jwt", "Invalid JWT format"),
        ("a.b", "Invalid JWT format"),
        ("a.b.c.d", "Invalid JWT format"),
        ("header.@@@.sig", "Failed to decode JWT payload"),
        (None, "Missing user_id claim in JWT"),
        ("blank-claim", "Missing user_id claim in JWT"),
    ],
)
def test_rejections_are_401(token, detail):
    if token is None:
        token = _unsigned({"sub": "user-123"})
    elif token == "blank-claim":
        token = _unsigned({"user_id": " "})

    with pytest.raises(HTTPException) as exc_info:
        extract_user_id(token)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == detail
    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}
