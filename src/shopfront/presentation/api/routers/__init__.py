from shopfront.presentation.api.routers.admin import router as admin_router
from shopfront.presentation.api.routers.reports import router as reports_router
from shopfront.presentation.api.routers.superuser import router as superuser_router
from shopfront.presentation.api.routers.users import router as users_router

__all__ = [
    "admin_router",
    "reports_router",
    "superuser_router",
    "users_router",
]
