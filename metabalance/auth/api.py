# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi import APIRouter, Depends, HTTPException, Response

from ..config import settings
from .models import AuthResponse, LoginRequest, RegisterRequest, StatusResponse, UserPublic
from .security import (
    TOKEN_COOKIE_NAME,
    create_access_token,
    get_current_user,
    hash_password,
    is_owner,
    verify_password,
)
from .storage import create_user, get_user_by_email, touch_last_signed_in

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _public(user: Mapping[str, Any]) -> UserPublic:
    return UserPublic(
        id=user["id"],
        email=user["email"],
        name=user.get("name"),
        is_owner=is_owner(user),
        created_at=user["created_at"],
    )


def _signed_in(response: Response, user: Mapping[str, Any]) -> AuthResponse:
    token = create_access_token(user_id=user["id"], email=user["email"])
    response.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        max_age=int(settings.token_ttl_days) * 86400,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return AuthResponse(user=_public(user), token=token)


@router.post("/register", response_model=AuthResponse, summary="Create an account and sign in")
def register(request: RegisterRequest, response: Response):
    if get_user_by_email(request.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    user = create_user(
        email=request.email,
        password_hash=hash_password(request.password),
        name=request.name,
    )
    log.info("registered user %s", user["id"])
    return _signed_in(response, user)


@router.post("/login", response_model=AuthResponse, summary="Sign in with email and password")
def login(request: LoginRequest, response: Response):
    user = get_user_by_email(request.email)
    if user is None or not verify_password(request.password, user["password_hash"]):
        log.info("failed sign-in for %s", request.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")
    touch_last_signed_in(user["id"])
    return _signed_in(response, user)


@router.post("/logout", response_model=StatusResponse, summary="Clear the session cookie")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    return StatusResponse()


@router.get("/me", response_model=UserPublic, summary="The signed-in user")
def me(user: dict = Depends(get_current_user)):
    return _public(user)
