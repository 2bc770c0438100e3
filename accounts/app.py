"""FastAPI application factory for the accounts API."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from accounts.core.errors import AccountError, ErrorCode
from accounts.core.logging import configure_logging
from accounts.routers import auth as auth_router
from accounts.routers import users as users_router

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EMAIL_TAKEN: 409,
    ErrorCode.USERNAME_TAKEN: 409,
    ErrorCode.INVALID_CREDENTIALS: 401,
    ErrorCode.NO_PROJECT_SELECTED: 409,
    ErrorCode.NOT_MEMBER: 403,
    ErrorCode.NOT_FOUND: 404,
}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AccountError)
    async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
        status = ERROR_STATUS.get(exc.code, 400)
        logger.info("%s %s -> %s (%s)", request.method, request.url.path, status, exc.code.value)
        return JSONResponse(
            status_code=status,
            content={"error_code": exc.code.value, "message": exc.message},
        )


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Accounts API")
    register_error_handlers(app)
    app.include_router(auth_router.router)
    app.include_router(users_router.router)
    return app
