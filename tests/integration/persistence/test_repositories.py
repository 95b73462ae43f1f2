"""Repository tests against SQLite."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from shopfront.domain.user import (
    EmailAlreadyExistsError,
    SuperUser,
    SuperUserAlreadyExistsError,
    User,
)
from shopfront.infrastructure.persistence.sqlalchemy.models import (
    OrderItemModel,
    OrderModel,
    ProductModel,
)

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_user(email: str = "jane@example.com", is_admin: bool = False) -> User:
    return User.create(name="Jane", email=email, password_hash="h", is_admin=is_admin)


def make_superuser(email: str = "root@example.com") -> SuperUser:
    return SuperUser.create(name="Root", email=email, password_hash="h")


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self, factory):
        repo = factory.user_repository()
        user = make_user(is_admin=True)

        await repo.save(user)
        found = await repo.find_by_email("JANE@example.com")

        assert found == user
        assert found.is_admin is True
        assert found.created_at.tzinfo is not None
        assert await repo.exists_by_email("jane@example.com")
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_duplicate_email_raises(self, factory):
        repo = factory.user_repository()
        await repo.save(make_user())

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(make_user())

    @pytest.mark.asyncio
    async def test_update_and_delete(self, factory):
        repo = factory.user_repository()
        user = make_user()
        await repo.save(user)

        user.rename("Janet")
        await repo.save(user)
        assert (await repo.find_by_id(user.id)).name == "Janet"

        await repo.delete(user.id)
        assert await repo.find_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_find_by_ids(self, factory):
        repo = factory.user_repository()
        a = make_user("a@example.com")
        b = make_user("b@example.com")
        await repo.save(a)
        await repo.save(b)

        found = await repo.find_by_ids([a.id, uuid4()])

        assert set(found) == {a.id}


class TestSuperUserRepository:
    @pytest.mark.asyncio
    async def test_find_active_and_count(self, factory):
        repo = factory.superuser_repository()
        superuser = make_superuser()

        await repo.save(superuser)

        assert await repo.count_active() == 1
        active = await repo.find_active()
        assert active == superuser
        assert active.last_login_at is not None

    @pytest.mark.asyncio
    async def test_second_active_superuser_violates_index(self, factory):
        repo = factory.superuser_repository()
        await repo.save(make_superuser())

        with pytest.raises(SuperUserAlreadyExistsError):
            await repo.save(make_superuser("second@example.com"))

    @pytest.mark.asyncio
    async def test_reused_email_of_inactive_superuser(self, factory):
        repo = factory.superuser_repository()
        old = make_superuser()
        await repo.save(old)
        old.deactivate()
        await repo.save(old)

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(make_superuser())

    @pytest.mark.asyncio
    async def test_inactive_superusers_do_not_count(self, factory):
        repo = factory.superuser_repository()
        old = make_superuser()
        await repo.save(old)

        old.deactivate()
        await repo.save(old)
        await repo.save(make_superuser("new@example.com"))

        assert await repo.count_active() == 1
        assert (await repo.find_active()).email == "new@example.com"


class TestCommerceRepositories:
    @pytest.mark.asyncio
    async def test_orders_and_products(self, factory, db_session):
        product_id = uuid4()
        db_session.add_all(
            [
                ProductModel(
                    id=product_id,
                    name="Book",
                    category="Books",
                    price=Decimal("12.50"),
                    count_in_stock=3,
                ),
                ProductModel(
                    id=uuid4(),
                    name="Game",
                    category="Games",
                    price=Decimal("40.00"),
                    count_in_stock=30,
                ),
                OrderModel(
                    id=uuid4(),
                    user_id=uuid4(),
                    total_price=Decimal("25.00"),
                    is_paid=True,
                    created_at=NOW - timedelta(days=1),
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
                    user_id=None,
                    total_price=Decimal("10.00"),
                    is_paid=False,
                    created_at=NOW - timedelta(days=20),
                ),
            ],
        )
        await db_session.flush()

        orders = factory.order_repository()
        products = factory.product_repository()

        assert await orders.count() == 2
        assert await orders.sum_paid_revenue() == Decimal("25.00")
        recent = await orders.list_since(NOW - timedelta(days=7))
        assert len(recent) == 1
        assert recent[0].items[0].line_total == Decimal("25.00")
        assert len(await orders.list_since(None)) == 2
        assert (await orders.list_recent(limit=1))[0].total_price == Decimal("25.00")

        assert await products.count() == 2
        assert await products.count_low_stock(10) == 1
        assert {p.category for p in await products.list_all()} == {"Books", "Games"}

    @pytest.mark.asyncio
    async def test_revenue_without_orders_is_zero(self, factory):
        assert await factory.order_repository().sum_paid_revenue() == Decimal("0")
