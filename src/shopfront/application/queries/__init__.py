"""Query layer - read-only operations.

Queries load snapshots through repositories and return domain records
or DTOs. They never mutate state.
"""

from shopfront.application.queries.admin_stats_query import AdminStatsQuery
from shopfront.application.queries.list_users_query import ListUsersQuery
from shopfront.application.queries.report_query import ReportQuery

__all__ = [
    "AdminStatsQuery",
    "ListUsersQuery",
    "ReportQuery",
]
