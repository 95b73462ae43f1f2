"""Unit tests for PasswordHashingService."""

import pytest

from shopfront_auth.exceptions import WeakPasswordError
from shopfront_auth.services import PasswordHashingService


class TestPasswordHashing:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_hash_and_verify(self):
        password_hash = self.service.hash("secret123")

        assert password_hash != "secret123"
        assert password_hash.startswith("$2")
        assert self.service.verify("secret123", password_hash)
        assert not self.service.verify("wrong", password_hash)

    def test_hashes_are_salted(self):
        assert self.service.hash("secret123") != self.service.hash("secret123")

    def test_verify_with_invalid_hash_returns_false(self):
        assert self.service.verify("secret123", "not-a-bcrypt-hash") is False

    def test_rounds_out_of_range_raise(self):
        with pytest.raises(ValueError, match="between 4 and 31"):
            PasswordHashingService(rounds=3)


class TestPasswordStrength:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4, min_length=6)

    @pytest.mark.parametrize("password", ["", "12345"])
    def test_short_passwords_rejected(self, password):
        with pytest.raises(WeakPasswordError):
            self.service.hash(password)

    def test_minimum_length_accepted(self):
        self.service.validate_strength("123456")

    def test_bcrypt_byte_limit_accepted(self):
        password_hash = self.service.hash("x" * 72)

        assert self.service.verify("x" * 72, password_hash)

    def test_overlong_password_rejected(self):
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            self.service.hash("x" * 100)

    def test_multibyte_password_measured_in_bytes(self):
        # 30 characters, 90 bytes in UTF-8
        password = "\u20ac" * 30

        with pytest.raises(WeakPasswordError, match="72 bytes"):
            self.service.hash(password)

    def test_verify_overlong_password_returns_false(self):
        password_hash = self.service.hash("secret123")

        assert self.service.verify("x" * 100, password_hash) is False


class TestNeedsRehash:
    def test_same_cost_does_not_need_rehash(self):
        service = PasswordHashingService(rounds=4)
        assert not service.needs_rehash(service.hash("secret123"))

    def test_different_cost_needs_rehash(self):
        low = PasswordHashingService(rounds=4)
        high = PasswordHashingService(rounds=5)
        assert high.needs_rehash(low.hash("secret123"))

    def test_unparseable_hash_needs_rehash(self):
        assert PasswordHashingService(rounds=4).needs_rehash("plaintext")
