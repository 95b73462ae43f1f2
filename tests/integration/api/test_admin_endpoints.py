"""Integration tests for /api/admin endpoints."""

from datetime import timedelta
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from shopfront.domain.shared import utc_now
from shopfront.infrastructure.persistence.sqlalchemy.models import (
    OrderItemModel,
    OrderModel,
    ProductModel,
)
from shopfront.presentation.api.dependencies import get_session_maker


@pytest.fixture
def admin_token(test_client: TestClient, api: str, superuser_token: str, auth_header):
    """Create an admin user via the superuser and sign in as that admin."""
    response = test_client.post(
        f"{api}/admin/users",
        headers=auth_header(superuser_token),
        json={
            "name": "Ada",
            "email": "ada@example.com",
            "password": "adminpass",
            "is_admin": True,
        },
    )
    assert response.status_code == 201, response.text

    signin = test_client.post(
        f"{api}/users/signin",
        json={"email": "ada@example.com", "password": "adminpass"},
    )
    assert signin.json()["role"] == "admin"
    return signin.json()["token"]


def seed_catalog(test_client: TestClient, customer_id) -> None:
    """Insert products and orders on the client's event loop."""
    product_id = uuid4()

    async def _seed():
        async with get_session_maker()() as session:
            session.add_all(
                [
                    ProductModel(
                        id=product_id,
                        name="Book",
                        category="Books",
                        price=Decimal("12.50"),
                        count_in_stock=3,
                    ),
                    OrderModel(
                        id=uuid4(),
                        user_id=UUID(customer_id),
                        total_price=Decimal("25.00"),
                        is_paid=True,
                        is_delivered=True,
                        created_at=utc_now() - timedelta(days=1),
                        items=[
                            OrderItemModel(
                                position=0,
                                product_id=product_id,
                                name="Book",
                                qty=2,
                                price=Decimal("12.50"),
                            ),
                        ],
                    ),
                    OrderModel(
                        id=uuid4(),
                        user_id=UUID(customer_id),
                        total_price=Decimal("40.00"),
                        is_paid=False,
                        created_at=utc_now() - timedelta(days=30),
                    ),
                ],
            )
            await session.commit()

    test_client.portal.call(_seed)


class TestAdminUsers:
    def test_list_users_as_admin(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        register_user,
        auth_header,
    ):
        register_user()

        response = test_client.get(f"{api}/admin/users", headers=auth_header(admin_token))

        assert response.status_code == 200
        emails = {u["email"] for u in response.json()}
        assert emails == {"ada@example.com", "jane@example.com"}

    def test_list_users_as_non_admin(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
        auth_header,
    ):
        user_token = register_user()["token"]

        response = test_client.get(f"{api}/admin/users", headers=auth_header(user_token))

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_list_users_without_auth(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
    ):
        response = test_client.get(f"{api}/admin/users")

        assert response.status_code == 401

    def test_update_and_toggle_admin(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        register_user,
        auth_header,
    ):
        user = register_user()

        update = test_client.put(
            f"{api}/admin/users/{user['id']}",
            headers=auth_header(admin_token),
            json={"name": "Jane Renamed", "password": ""},
        )
        assert update.status_code == 200
        assert update.json()["name"] == "Jane Renamed"

        toggled = test_client.put(
            f"{api}/admin/users/{user['id']}/toggle-admin",
            headers=auth_header(admin_token),
        )
        assert toggled.json()["is_admin"] is True

        explicit = test_client.put(
            f"{api}/admin/users/{user['id']}/toggle-admin",
            headers=auth_header(admin_token),
            json={"is_admin": True},
        )
        assert explicit.json()["is_admin"] is True

        # the old password still works after the empty-password update
        signin = test_client.post(
            f"{api}/users/signin",
            json={"email": "jane@example.com", "password": "secret123"},
        )
        assert signin.json()["role"] == "admin"

    def test_admin_cannot_delete_self(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        auth_header,
    ):
        me = test_client.get(f"{api}/admin/users", headers=auth_header(admin_token))
        my_id = next(u["id"] for u in me.json() if u["email"] == "ada@example.com")

        response = test_client.delete(
            f"{api}/admin/users/{my_id}",
            headers=auth_header(admin_token),
        )

        assert response.status_code == 403
        assert response.json()["code"] == "CANNOT_DELETE_SELF"

    def test_delete_user(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        register_user,
        auth_header,
    ):
        user = register_user()

        deleted = test_client.delete(
            f"{api}/admin/users/{user['id']}",
            headers=auth_header(admin_token),
        )
        again = test_client.delete(
            f"{api}/admin/users/{user['id']}",
            headers=auth_header(admin_token),
        )

        assert deleted.status_code == 204
        assert again.status_code == 404
        assert again.json()["code"] == "USER_NOT_FOUND"


class TestAdminStats:
    def test_stats(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        register_user,
        auth_header,
    ):
        customer = register_user()
        seed_catalog(test_client, customer["id"])

        response = test_client.get(f"{api}/admin/stats", headers=auth_header(admin_token))

        assert response.status_code == 200
        stats = response.json()
        assert stats["total_users"] == 2
        assert stats["total_products"] == 1
        assert stats["total_orders"] == 2
        assert Decimal(stats["total_revenue"]) == Decimal("25.00")
        assert stats["low_stock_products"] == 1
        assert stats["recent_orders"][0]["user"]["email"] == "jane@example.com"


class TestReports:
    def test_overview_report_defaults_to_seven_days(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        register_user,
        auth_header,
    ):
        seed_catalog(test_client, register_user()["id"])

        response = test_client.get(
            f"{api}/admin/reports/overview",
            headers=auth_header(admin_token),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["type"] == "overview"
        assert body["days"] == 7
        data = body["data"]
        assert data["total_orders"] == 1
        assert Decimal(data["total_revenue"]) == Decimal("25.00")
        assert Decimal(data["completion_rate"]) == Decimal("100")
        assert data["top_categories"][0]["category"] == "Books"

    def test_users_report_with_wider_window(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        register_user,
        auth_header,
    ):
        seed_catalog(test_client, register_user()["id"])

        response = test_client.get(
            f"{api}/admin/reports/users?days=60",
            headers=auth_header(admin_token),
        )

        data = response.json()["data"]
        assert data["unique_customers"] == 1
        assert data["repeat_customers"] == 1

    def test_products_report_flags_low_stock(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        register_user,
        auth_header,
    ):
        seed_catalog(test_client, register_user()["id"])

        response = test_client.get(
            f"{api}/admin/reports/products",
            headers=auth_header(admin_token),
        )

        row = response.json()["data"]["product_sales"][0]
        assert row["sales"] == 2
        assert row["is_low_stock"] is True

    def test_unknown_report_type(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        auth_header,
    ):
        response = test_client.get(
            f"{api}/admin/reports/inventory",
            headers=auth_header(admin_token),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REPORT_TYPE"

    def test_negative_window_is_rejected(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        auth_header,
    ):
        response = test_client.get(
            f"{api}/admin/reports/sales?days=-1",
            headers=auth_header(admin_token),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_reports_require_admin(
        self,
        test_client: TestClient,
        api: str,
        superuser_token: str,
        register_user,
        auth_header,
    ):
        user_token = register_user()["token"]

        response = test_client.get(
            f"{api}/admin/reports/overview",
            headers=auth_header(user_token),
        )

        assert response.status_code == 403

    def test_export_downloads_workbook(
        self,
        test_client: TestClient,
        api: str,
        admin_token: str,
        auth_header,
    ):
        response = test_client.get(
            f"{api}/admin/reports/sales/export?days=30",
            headers=auth_header(admin_token),
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
        assert "sales-report-" in response.headers["content-disposition"]
        assert response.content[:2] == b"PK"
