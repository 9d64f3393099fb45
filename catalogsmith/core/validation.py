"""Construction-time input validation for catalog resources.

Every check is a total format check. Failures raise
``ProductValidationError`` naming the offending construct path, e.g.
``Invalid support email for resource Stack/MyProduct, expected email, got: 'invalid email'``.
"""

from __future__ import annotations

import re
from collections.abc import Sized

_EMAIL_RE = re.compile(r"[\w\d.%+\-]+@[a-z\d.\-]+\.[a-z]{2,4}", re.IGNORECASE)
_URL_RE = re.compile(r"^https?://.*", re.IGNORECASE)


class ProductValidationError(ValueError):
    """Raised when a construct is given invalid properties."""


def validate_length(
    resource_name: str,
    description: str,
    min_length: int,
    max_length: int,
    value: str | None,
) -> None:
    if value is None:
        return
    if not min_length <= len(value) <= max_length:
        raise ProductValidationError(
            f"Invalid {description} length for resource {resource_name}, "
            f"must be between {min_length} and {max_length}, got: {len(value)}"
        )


def validate_url(resource_name: str, description: str, value: str | None) -> None:
    if value is None:
        return
    if not _URL_RE.match(value):
        raise ProductValidationError(
            f"Invalid {description} for resource {resource_name}, "
            f"expected URL, got: {value!r}"
        )


def validate_email(resource_name: str, description: str, value: str | None) -> None:
    if value is None:
        return
    if not _EMAIL_RE.fullmatch(value):
        raise ProductValidationError(
            f"Invalid {description} for resource {resource_name}, "
            f"expected email, got: {value!r}"
        )


def validate_non_empty(resource_name: str, description: str, value: Sized) -> None:
    if len(value) == 0:
        raise ProductValidationError(
            f"Invalid {description} for resource {resource_name}, must not be empty"
        )
