# -*- coding: utf-8 -*-
"""Auth — password hashing, session tokens and the current-user dependency.

Tokens are compact HS256 JWTs carrying ``sub`` (user id), ``email``, ``iat``
and ``exp``. They arrive either as ``Authorization: Bearer ...`` or in the
``metabalance_token`` cookie set at login.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import os
from datetime import timedelta
from typing import Any, Dict, Mapping, Optional

from fastapi import Depends, HTTPException, Request

from ..config import settings
from ..dates import utc_now
from .storage import get_user_by_id

TOKEN_COOKIE_NAME = "metabalance_token"

HASH_SCHEME = "pbkdf2_sha256"
HASH_ITERATIONS = 200_000
SALT_BYTES = 16

_JWT_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64e(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64d(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _json_b64(data: Mapping[str, Any]) -> str:
    return _b64e(json.dumps(data, separators=(",", ":")).encode("utf-8"))


# ---- passwords ----


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    """``pbkdf2_sha256$<iterations>$<salt>$<digest>``"""
    salt = os.urandom(SALT_BYTES)
    digest = _derive(password, salt, HASH_ITERATIONS)
    return "$".join((HASH_SCHEME, str(HASH_ITERATIONS), _b64e(salt), _b64e(digest)))


def verify_password(password: str, stored: str) -> bool:
    parts = stored.split("$")
    if len(parts) != 4 or parts[0] != HASH_SCHEME or not parts[1].isdigit():
        return False
    _, iterations, salt, digest = parts
    return hmac.compare_digest(_derive(password, _b64d(salt), int(iterations)), _b64d(digest))


# ---- tokens ----


def _signature(signing_input: str) -> bytes:
    return hmac.new(settings.jwt_secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256).digest()


def create_access_token(*, user_id: str, email: str) -> str:
    issued = utc_now()
    expires = issued + timedelta(days=int(settings.token_ttl_days))
    claims = {
        "sub": user_id,
        "email": email,
        "iat": int(issued.timestamp()),
        "exp": int(expires.timestamp()),
    }
    signing_input = f"{_json_b64(_JWT_HEADER)}.{_json_b64(claims)}"
    return f"{signing_input}.{_b64e(_signature(signing_input))}"


def decode_token(token: str) -> Dict[str, Any]:
    """Verified claims, or 401."""
    head, _, signature = token.rpartition(".")
    if head.count(".") != 1:
        raise HTTPException(status_code=401, detail="Invalid token")
    try:
        valid = hmac.compare_digest(_signature(head), _b64d(signature))
        claims = json.loads(_b64d(head.split(".", 1)[1]))
    except (ValueError, UnicodeError) as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc
    if not valid or not isinstance(claims, dict):
        raise HTTPException(status_code=401, detail="Invalid token")
    if int(claims.get("exp") or 0) < int(utc_now().timestamp()):
        raise HTTPException(status_code=401, detail="Token expired")
    return claims


def token_from_request(request: Request) -> Optional[str]:
    scheme, _, credentials = (request.headers.get("authorization") or "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


# ---- request helpers ----


def is_owner(user: Mapping[str, Any]) -> bool:
    """Whether ``user`` is the configured owner account."""
    return bool(settings.owner_email) and (user.get("email") or "").lower() == settings.owner_email


def get_current_user_from_request(request: Request) -> Dict[str, Any]:
    cached = getattr(request.state, "user", None)
    if cached:
        return cached

    token = token_from_request(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user_id = str(decode_token(token).get("sub") or "")
    user = get_user_by_id(user_id) if user_id else None
    if not user:
        raise HTTPException(status_code=401, detail="User not found")

    request.state.user = user
    return user


def get_current_user(user: Dict[str, Any] = Depends(get_current_user_from_request)) -> Dict[str, Any]:
    return user
