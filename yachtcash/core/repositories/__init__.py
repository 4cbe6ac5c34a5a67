from yachtcash.core.repositories.base import TenantContextMissingError, TenantRepository
from yachtcash.core.repositories.cash_balances import CashBalanceRepository, totals_by_currency
from yachtcash.core.repositories.roles import RoleRepository
from yachtcash.core.repositories.tenants import TenantDirectory
from yachtcash.core.repositories.transactions import TransactionFlagRepository, TransactionRepository
from yachtcash.core.repositories.users import TenantUserRepository, UserRepository
from yachtcash.core.repositories.yachts import YachtCrewRepository, YachtRepository

__all__ = [
    "TenantContextMissingError",
    "TenantRepository",
    "TenantDirectory",
    "UserRepository",
    "TenantUserRepository",
    "RoleRepository",
    "YachtRepository",
    "YachtCrewRepository",
    "CashBalanceRepository",
    "TransactionRepository",
    "TransactionFlagRepository",
    "totals_by_currency",
]
