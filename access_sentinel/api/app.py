from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from access_sentinel.domain.errors import ProtectedAccountViolation
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {
        "code": exc.base_error.code,
        "message": exc.base_error.message,
        "details": exc.base_error.details,
    }
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_protected_account_violation(request: Request, exc: ProtectedAccountViolation):
    error_dict = {"code": exc.code, "message": exc.message, "details": {}}
    logger.warning(f"Protected account violation: {exc.message}")
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"error": error_dict})


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Secure Access Sentinel", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from access_sentinel.api.routes import (
        access_requests,
        admin,
        audit,
        auth,
        health_check,
        notifications,
        two_factor,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(two_factor.router, tags=["Two-Factor"])
    app.include_router(access_requests.router, tags=["Access Requests"])
    app.include_router(admin.router, tags=["Admin"])
    app.include_router(audit.router, tags=["Audit"])
    app.include_router(notifications.router, tags=["Notifications"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(ProtectedAccountViolation, handle_protected_account_violation)

    return app
