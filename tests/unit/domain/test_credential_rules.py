"""Unit tests for the password policy and display name rules."""

import pytest

from todolist.domain.user import (
    InvalidNameError,
    UserName,
    WeakPasswordError,
    validate_password,
)


class TestValidatePassword:
    def test_accepts_minimum_length(self):
        assert validate_password("password") == "password"

    def test_accepts_maximum_length(self):
        password = "p" * 128

        assert validate_password(password) == password

    def test_rejects_short(self):
        with pytest.raises(WeakPasswordError, match="at least 8 characters"):
            validate_password("short")

    def test_rejects_long(self):
        with pytest.raises(WeakPasswordError, match="cannot exceed 128"):
            validate_password("p" * 129)

    @pytest.mark.parametrize("value", [None, ""])
    def test_rejects_missing(self, value):
        with pytest.raises(WeakPasswordError, match="required"):
            validate_password(value)


class TestUserName:
    def test_trims(self):
        assert UserName("  Jane  ").value == "Jane"

    def test_rejects_too_short_after_trim(self):
        with pytest.raises(InvalidNameError, match="at least 2 characters"):
            UserName(" J ")

    def test_rejects_too_long(self):
        with pytest.raises(InvalidNameError):
            UserName("n" * 101)

    def test_accepts_boundaries(self):
        assert UserName("Jo").value == "Jo"
        assert UserName("n" * 100).value == "n" * 100
