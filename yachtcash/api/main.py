import logging

from fastapi import FastAPI

from yachtcash.api.middleware import tenant_context_middleware
from yachtcash.api.routes.auth import router as auth_router
from yachtcash.api.routes.cash import router as cash_router
from yachtcash.api.routes.roles import router as roles_router
from yachtcash.api.routes.super_admin import router as super_admin_router
from yachtcash.api.routes.transactions import router as transactions_router
from yachtcash.api.routes.users import router as users_router
from yachtcash.api.routes.yachts import router as yachts_router
from yachtcash.core.config import settings
from yachtcash.core.errors import YachtCashError, yachtcash_error_handler

logging.getLogger("yachtcash").setLevel(settings.log_level.upper())

app = FastAPI(title="YachtCash API")
app.middleware("http")(tenant_context_middleware)
app.add_exception_handler(YachtCashError, yachtcash_error_handler)
app.include_router(super_admin_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(roles_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(yachts_router, prefix="/api")
app.include_router(cash_router, prefix="/api")
app.include_router(transactions_router, prefix="/api")


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/status", tags=["system"])
async def status_check() -> dict[str, str]:
    return {"status": "ok", "service": "yachtcash-api"}
