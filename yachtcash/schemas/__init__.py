from yachtcash.schemas.admin import (
    InitializeResponse,
    PermissionResponse,
    RoleCreateRequest,
    RoleResponse,
    RoleUpdateRequest,
    SystemStatsResponse,
)
from yachtcash.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    SessionResponse,
    TenantSummary,
    UserSummary,
)
from yachtcash.schemas.tenant import TenantCreateRequest, TenantResponse, TenantStatusUpdateRequest
from yachtcash.schemas.transaction import (
    TransactionCreateRequest,
    TransactionFlagRequest,
    TransactionFlagResponse,
    TransactionResponse,
    TransactionUpdateRequest,
)
from yachtcash.schemas.user import (
    PasswordResetRequest,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from yachtcash.schemas.yacht import (
    CashBalanceResponse,
    CashBalanceUpdateRequest,
    CashSummaryResponse,
    CrewAssignmentRequest,
    CrewAssignmentResponse,
    YachtCreateRequest,
    YachtResponse,
    YachtUpdateRequest,
)

__all__ = [
    "InitializeResponse",
    "PermissionResponse",
    "RoleCreateRequest",
    "RoleResponse",
    "RoleUpdateRequest",
    "SystemStatsResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "SessionResponse",
    "TenantSummary",
    "UserSummary",
    "TenantCreateRequest",
    "TenantResponse",
    "TenantStatusUpdateRequest",
    "TransactionCreateRequest",
    "TransactionFlagRequest",
    "TransactionFlagResponse",
    "TransactionResponse",
    "TransactionUpdateRequest",
    "PasswordResetRequest",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
    "CashBalanceResponse",
    "CashBalanceUpdateRequest",
    "CashSummaryResponse",
    "CrewAssignmentRequest",
    "CrewAssignmentResponse",
    "YachtCreateRequest",
    "YachtResponse",
    "YachtUpdateRequest",
]
