"""Pydantic schemas for API request/response models."""

from shopfront.presentation.api.schemas.admin import (
    AdminStatsResponse,
    CreateUserRequest,
    OrderCustomerResponse,
    RecentOrderResponse,
    ToggleAdminRequest,
    UpdateUserRequest,
    UserSummaryResponse,
)
from shopfront.presentation.api.schemas.reports import (
    CategoryRevenueResponse,
    CustomerSummaryResponse,
    DailySalesResponse,
    OverviewReportResponse,
    ProductSalesResponse,
    ProductsReportResponse,
    ReportResponse,
    SalesReportResponse,
    UsersReportResponse,
)
from shopfront.presentation.api.schemas.superuser import (
    CreateSuperUserRequest,
    SuperUserAuthResponse,
    SuperUserCheckResponse,
    SuperUserProfileResponse,
    UpdateSuperUserRequest,
)
from shopfront.presentation.api.schemas.users import (
    AuthResponse,
    RegisterRequest,
    SigninRequest,
    UpdateProfileRequest,
    UserResponse,
)

__all__ = [
    "AdminStatsResponse",
    "AuthResponse",
    "CategoryRevenueResponse",
    "CreateSuperUserRequest",
    "CreateUserRequest",
    "CustomerSummaryResponse",
    "DailySalesResponse",
    "OrderCustomerResponse",
    "OverviewReportResponse",
    "ProductSalesResponse",
    "ProductsReportResponse",
    "RecentOrderResponse",
    "RegisterRequest",
    "ReportResponse",
    "SalesReportResponse",
    "SigninRequest",
    "SuperUserAuthResponse",
    "SuperUserCheckResponse",
    "SuperUserProfileResponse",
    "ToggleAdminRequest",
    "UpdateProfileRequest",
    "UpdateSuperUserRequest",
    "UserResponse",
    "UserSummaryResponse",
    "UsersReportResponse",
]
