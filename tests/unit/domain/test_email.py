"""Unit tests for the Email value object and normalization."""

import pytest

from todolist.domain.shared.exceptions import ErrorKind
from todolist.domain.user import Email, InvalidEmailError, normalize_email


class TestNormalizeEmail:
    @pytest.mark.parametrize(
        "raw",
        ["U@Test.com", "  user@example.com  ", "MiXeD@Case.ORG", "a@b.co"],
    )
    def test_idempotent(self, raw):
        once = normalize_email(raw)

        assert normalize_email(once) == once

    def test_lowercases_and_trims(self):
        assert normalize_email("  U@Test.com ") == "u@test.com"


class TestEmail:
    def test_normalizes_value(self):
        assert Email("U@Test.com").value == "u@test.com"

    def test_equal_after_normalization(self):
        assert Email("USER@example.com") == Email(" user@example.com")

    @pytest.mark.parametrize(
        "raw",
        ["not-an-email", "missing@tld", "@example.com", "a b@example.com"],
    )
    def test_rejects_malformed(self, raw):
        with pytest.raises(InvalidEmailError, match="valid email address"):
            Email(raw)

    def test_rejects_empty(self):
        with pytest.raises(InvalidEmailError, match="required"):
            Email("   ")

    def test_error_is_invalid_input(self):
        with pytest.raises(InvalidEmailError) as exc_info:
            Email("nope")

        assert exc_info.value.kind is ErrorKind.INVALID_INPUT

    def test_max_length(self):
        local = "a" * (255 - len("@example.com"))
        assert len(Email(f"{local}@example.com").value) == 255

        with pytest.raises(InvalidEmailError, match="255 characters or less"):
            Email("a" * 300 + "@example.com")
