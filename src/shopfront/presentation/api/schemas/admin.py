from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class CreateUserRequest(BaseModel):
    """Request schema for creating a new user."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    is_admin: bool = False


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user.

    An empty or missing password keeps the current one.
    """

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, max_length=72)
    is_admin: Optional[bool] = None


class ToggleAdminRequest(BaseModel):
    """Explicit admin flag. Without a body the flag is flipped."""

    is_admin: Optional[bool] = None


class UserSummaryResponse(BaseModel):
    """Response schema for a user summary."""

    id: UUID
    name: str
    email: str
    is_admin: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderCustomerResponse(BaseModel):
    id: UUID
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class RecentOrderResponse(BaseModel):
    id: UUID
    total_price: Decimal
    is_paid: bool
    is_delivered: bool
    created_at: datetime
    user: Optional[OrderCustomerResponse] = None

    model_config = ConfigDict(from_attributes=True)


class AdminStatsResponse(BaseModel):
    """Dashboard counters. Revenue only counts paid orders."""

    total_users: int
    total_products: int
    total_orders: int
    total_revenue: Decimal
    low_stock_products: int
    recent_orders: list[RecentOrderResponse]

    model_config = ConfigDict(from_attributes=True)
