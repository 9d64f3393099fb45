"""Tests for construction-time input validation."""

from __future__ import annotations

import pytest

from catalogsmith.core.validation import (
    ProductValidationError,
    validate_email,
    validate_length,
    validate_non_empty,
    validate_url,
)

RESOURCE = "Stack/MyProduct"


class TestValidateEmail:
    @pytest.mark.parametrize(
        "email",
        ["owner@example.com", "first.last+tag@sub.example.org", "A_B%c@EXAMPLE.IO"],
    )
    def test_accepts_valid(self, email):
        validate_email(RESOURCE, "support email", email)

    @pytest.mark.parametrize(
        "email",
        ["invalid email", "no-at-sign.com", "user@nodot", "user@example.toolongtld", ""],
    )
    def test_rejects_invalid(self, email):
        with pytest.raises(ProductValidationError, match=f"Invalid support email for resource {RESOURCE}"):
            validate_email(RESOURCE, "support email", email)

    @pytest.mark.parametrize("email", ["owner@example.com\n", "\nowner@example.com"])
    def test_rejects_surrounding_newline(self, email):
        with pytest.raises(ProductValidationError, match="expected email"):
            validate_email(RESOURCE, "support email", email)

    def test_none_is_skipped(self):
        validate_email(RESOURCE, "support email", None)


class TestValidateUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://awsdocs.s3.amazonaws.com/servicecatalog/development-environment.template",
            "http://example.com",
            "HTTPS://EXAMPLE.COM/x",
        ],
    )
    def test_accepts_valid(self, url):
        validate_url(RESOURCE, "provisioning template url", url)

    @pytest.mark.parametrize("url", ["invalid url", "ftp://example.com", "s3://bucket/key"])
    def test_rejects_invalid(self, url):
        with pytest.raises(
            ProductValidationError,
            match=f"Invalid provisioning template url for resource {RESOURCE}",
        ):
            validate_url(RESOURCE, "provisioning template url", url)


class TestValidateLength:
    def test_within_bounds(self):
        validate_length(RESOURCE, "product name", 1, 100, "testProduct")

    def test_too_short(self):
        with pytest.raises(ProductValidationError, match="Invalid product name length"):
            validate_length(RESOURCE, "product name", 1, 100, "")

    def test_too_long(self):
        with pytest.raises(ProductValidationError, match="got: 101"):
            validate_length(RESOURCE, "product name", 1, 100, "x" * 101)

    def test_none_is_skipped(self):
        validate_length(RESOURCE, "product description", 0, 10, None)


class TestValidateNonEmpty:
    def test_empty_rejected(self):
        with pytest.raises(ProductValidationError, match=f"Invalid product versions for resource {RESOURCE}"):
            validate_non_empty(RESOURCE, "product versions", [])

    def test_non_empty_accepted(self):
        validate_non_empty(RESOURCE, "product versions", [object()])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_non_empty(RESOURCE, "product versions", ())
