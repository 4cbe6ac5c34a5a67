from yachtcash.models.base import Base, TenantScopedBase, TimestampedBase
from yachtcash.models.cash_balance import CashBalance
from yachtcash.models.role import Role
from yachtcash.models.tenant import Tenant
from yachtcash.models.transaction import Transaction
from yachtcash.models.transaction_flag import TransactionFlag
from yachtcash.models.user import User
from yachtcash.models.yacht import Yacht
from yachtcash.models.yacht_crew import YachtCrewAssignment

__all__ = [
    "Base",
    "TimestampedBase",
    "TenantScopedBase",
    "Tenant",
    "User",
    "Role",
    "Yacht",
    "YachtCrewAssignment",
    "CashBalance",
    "Transaction",
    "TransactionFlag",
]
