"""Tests for form validators (email, name, required field)."""

import pytest

from comingsoon.application.services.validators import (
    EmailValidator,
    FieldValidator,
    NameValidator,
    is_valid_email,
)


class TestEmailValidator:
    @pytest.mark.parametrize(
        "email", ["user@example.com", "first.last+tag@sub.example.org", "a_b-c@x.io"]
    )
    def test_valid(self, email: str) -> None:
        assert EmailValidator.validate(email).is_valid

    def test_blank_is_required(self) -> None:
        assert EmailValidator.validate("").error_message == "Email is required"
        assert EmailValidator.validate("   ").error_message == "Email is required"

    @pytest.mark.parametrize(
        "email", ["userexample.com", "user@example", "user@example.c", "user name@example.com"]
    )
    def test_bad_format(self, email: str) -> None:
        assert EmailValidator.validate(email).error_message == "Invalid email format"

    def test_pattern_must_match_whole_string(self) -> None:
        assert not is_valid_email("user@example.com trailing")


class TestNameValidator:
    def test_valid(self) -> None:
        assert NameValidator.validate("Ada Lovelace").is_valid
        assert NameValidator.validate("Al").is_valid
        assert NameValidator.validate("x" * 100).is_valid

    def test_blank(self) -> None:
        assert NameValidator.validate(" ").error_message == "Name is required"

    def test_too_short(self) -> None:
        assert NameValidator.validate("A").error_message == "Name must be at least 2 characters"

    def test_too_long(self) -> None:
        assert (
            NameValidator.validate("x" * 101).error_message
            == "Name must not exceed 100 characters"
        )


class TestFieldValidator:
    def test_blank_uses_label(self) -> None:
        assert FieldValidator.validate("", "Institution").error_message == "Institution is required"

    def test_non_blank(self) -> None:
        assert FieldValidator.validate("IIT Delhi", "Institution").is_valid
