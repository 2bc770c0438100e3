from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response

from accounts.core.rate_limiter import rate_limit_ip
from accounts.dependencies import get_access_token, get_auth_service
from accounts.schemas import SignInIn, SignInOut, SignUpIn, SignUpOut
from accounts.services.auth_service import AuthService, Credentials
from accounts.services.session_service import clear_session_cookie, set_session_cookie

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-up", response_model=SignUpOut, status_code=201)
def sign_up(body: SignUpIn, request: Request, auth: AuthService = Depends(get_auth_service)):
    rate_limit_ip(request, "sign-up")
    credentials = Credentials(email=body.credentials.email, password=body.credentials.password)
    result = auth.sign_up(credentials, body.username)
    return SignUpOut(email=result.email)


@router.post("/sign-in", response_model=SignInOut)
def sign_in(
    body: SignInIn,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    rate_limit_ip(request, "sign-in")
    credentials = Credentials(email=body.credentials.email, password=body.credentials.password)
    result = auth.sign_in(credentials)
    set_session_cookie(response, result.access_token)
    return SignInOut(access_token=result.access_token)


@router.post("/sign-out", status_code=204)
def sign_out(
    token: Optional[str] = Depends(get_access_token),
    auth: AuthService = Depends(get_auth_service),
):
    auth.sign_out(token)
    response = Response(status_code=204)
    clear_session_cookie(response)
    return response
