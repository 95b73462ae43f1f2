"""Unit tests for the User and SuperUser aggregates and value objects."""

from datetime import timedelta
from uuid import uuid4

import pytest

from shopfront.domain.shared import utc_now
from shopfront.domain.user import (
    Email,
    InvalidEmailError,
    MissingFieldError,
    Role,
    SuperUser,
    User,
)


class TestEmail:
    def test_normalizes_to_lowercase(self):
        assert Email("  Jane@Example.COM ").value == "jane@example.com"

    @pytest.mark.parametrize("value", ["", "   ", "no-at-sign", "a@b"])
    def test_invalid_values_raise(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestRole:
    def test_privilege_order(self):
        assert Role.SUPERUSER.satisfies(Role.ADMIN)
        assert Role.ADMIN.satisfies(Role.USER)
        assert not Role.USER.satisfies(Role.ADMIN)
        assert not Role.ADMIN.satisfies(Role.SUPERUSER)

    def test_superuser_implies_admin(self):
        assert Role.SUPERUSER.is_admin
        assert not Role.USER.is_admin


class TestUser:
    def test_create_regular_user(self):
        user = User.create(name="Jane", email="Jane@Example.com", password_hash="h")

        assert user.email == "jane@example.com"
        assert user.role == Role.USER
        assert user.is_admin is False

    def test_admin_flag_resolves_role(self):
        user = User.create(name="Jane", email="jane@example.com", password_hash="h")

        assert user.toggle_admin() is True
        assert user.role == Role.ADMIN

        user.set_admin(False)
        assert user.role == Role.USER

    def test_blank_name_rejected(self):
        with pytest.raises(MissingFieldError):
            User.create(name="  ", email="jane@example.com", password_hash="h")

    def test_rename_updates_timestamp(self):
        user = User.create(name="Jane", email="jane@example.com", password_hash="h")
        before = user.updated_at

        user.rename("Janet")

        assert user.name == "Janet"
        assert user.updated_at >= before

    def test_equality_by_id(self):
        user = User.create(name="Jane", email="jane@example.com", password_hash="h")
        same = User.reconstitute(
            id=user.id,
            name="Other",
            email="other@example.com",
            password_hash="x",
            is_admin=True,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        assert user == same


class TestSuperUser:
    def test_create_sets_last_login(self):
        superuser = SuperUser.create(
            name="Root",
            email="root@example.com",
            password_hash="h",
        )

        assert superuser.role == Role.SUPERUSER
        assert superuser.is_admin is True
        assert superuser.is_active is True
        assert superuser.created_by == "system"
        assert superuser.last_login_at is not None

    def test_record_login_is_monotonic(self):
        superuser = SuperUser.create(
            name="Root",
            email="root@example.com",
            password_hash="h",
        )
        first = superuser.last_login_at

        superuser.record_login()

        assert superuser.last_login_at >= first

    def test_record_login_never_moves_backwards(self):
        future = utc_now() + timedelta(days=1)
        superuser = SuperUser.reconstitute(
            id=uuid4(),
            name="Root",
            email="root@example.com",
            password_hash="h",
            is_active=True,
            created_by="system",
            last_login_at=future,
            created_at=future,
            updated_at=future,
        )

        superuser.record_login()

        assert superuser.last_login_at == future

    def test_deactivate(self):
        superuser = SuperUser.create(
            name="Root",
            email="root@example.com",
            password_hash="h",
        )

        superuser.deactivate()

        assert superuser.is_active is False
