from __future__ import annotations

from fastapi import Request, status
from starlette.responses import JSONResponse


class YachtCashError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "bad_request"
    message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class UnauthenticatedError(YachtCashError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthenticated"
    message = "Invalid or missing credentials"


class AccountInactiveError(YachtCashError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "account_inactive"
    message = "User account is not active"


class ForbiddenError(YachtCashError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    message = "Insufficient permissions"


class TenantContextRequiredError(YachtCashError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "tenant_context_required"
    message = "Tenant context required"


async def yachtcash_error_handler(request: Request, exc: YachtCashError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthenticatedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=headers,
    )
