"""Unit tests for role-based authorization."""

from uuid import uuid4

import pytest

from shopfront.application.context import Principal
from shopfront.application.services import (
    Action,
    Authorizer,
    DenyReason,
    authorize,
)
from shopfront.domain.shared import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
)
from shopfront.domain.user import Role
from shopfront_auth import JWTService


def principal(role: Role) -> Principal:
    return Principal(subject_id=uuid4(), email=f"{role.value}@example.com", role=role)


class TestAuthorize:
    def test_missing_principal_is_unauthenticated(self):
        decision = authorize(None, Role.USER)

        assert not decision.allowed
        assert decision.reason is DenyReason.UNAUTHENTICATED

    @pytest.mark.parametrize(
        ("role", "required", "allowed"),
        [
            (Role.USER, Role.USER, True),
            (Role.USER, Role.ADMIN, False),
            (Role.ADMIN, Role.ADMIN, True),
            (Role.ADMIN, Role.SUPERUSER, False),
            (Role.SUPERUSER, Role.ADMIN, True),
            (Role.SUPERUSER, Role.SUPERUSER, True),
        ],
    )
    def test_role_hierarchy(self, role, required, allowed):
        decision = authorize(principal(role), required)

        assert decision.allowed is allowed
        if not allowed:
            assert decision.reason is DenyReason.FORBIDDEN

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.SUPERUSER])
    def test_self_deletion_denied_regardless_of_role(self, role):
        p = principal(role)

        decision = authorize(
            p,
            Role.ADMIN,
            action=Action.DELETE_USER,
            target_id=p.subject_id,
        )

        assert decision.reason is DenyReason.FORBIDDEN
        assert decision.code is ErrorCode.CANNOT_DELETE_SELF

    def test_deleting_someone_else_allowed(self):
        decision = authorize(
            principal(Role.ADMIN),
            Role.ADMIN,
            action=Action.DELETE_USER,
            target_id=uuid4(),
        )

        assert decision.allowed

    def test_user_may_manage_own_account_only(self):
        p = principal(Role.USER)

        own = authorize(
            p,
            Role.USER,
            action=Action.MANAGE_OWN_ACCOUNT,
            target_id=p.subject_id,
        )
        other = authorize(
            p,
            Role.USER,
            action=Action.MANAGE_OWN_ACCOUNT,
            target_id=uuid4(),
        )

        assert own.allowed
        assert other.reason is DenyReason.FORBIDDEN

    def test_admin_may_manage_any_account(self):
        decision = authorize(
            principal(Role.ADMIN),
            Role.USER,
            action=Action.MANAGE_OWN_ACCOUNT,
            target_id=uuid4(),
        )

        assert decision.allowed


class TestRaiseForDenial:
    def test_unauthenticated_raises_authentication_error(self):
        with pytest.raises(AuthenticationError):
            authorize(None, Role.USER).raise_for_denial()

    def test_forbidden_raises_authorization_error(self):
        with pytest.raises(AuthorizationError) as exc_info:
            authorize(principal(Role.USER), Role.ADMIN).raise_for_denial()

        assert exc_info.value.message == "Admin access required"

    def test_allowed_is_noop(self):
        authorize(principal(Role.USER), Role.USER).raise_for_denial()


class TestAuthorizer:
    def setup_method(self):
        self.jwt = JWTService(secret_key="test-secret")
        self.authorizer = Authorizer(self.jwt)

    def test_decodes_valid_token(self):
        subject = uuid4()
        token = self.jwt.create_access_token(subject, "a@example.com", "admin")

        p, decision = self.authorizer.check(token, Role.ADMIN)

        assert decision.allowed
        assert p.subject_id == subject
        assert p.role is Role.ADMIN

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_unusable_tokens_are_unauthenticated(self, token):
        p, decision = self.authorizer.check(token, Role.USER)

        assert p is None
        assert decision.reason is DenyReason.UNAUTHENTICATED

    def test_unknown_role_claim_is_unauthenticated(self):
        token = self.jwt.create_access_token(uuid4(), "a@example.com", "root")

        assert self.authorizer.decode(token) is None
