from yachtcash.api.routes.auth import router as auth_router
from yachtcash.api.routes.cash import router as cash_router
from yachtcash.api.routes.roles import router as roles_router
from yachtcash.api.routes.super_admin import router as super_admin_router
from yachtcash.api.routes.transactions import router as transactions_router
from yachtcash.api.routes.users import router as users_router
from yachtcash.api.routes.yachts import router as yachts_router

__all__ = [
    "auth_router",
    "cash_router",
    "roles_router",
    "super_admin_router",
    "transactions_router",
    "users_router",
    "yachts_router",
]
