"""
UPI VPA (Virtual Payment Address), `username@provider`.

Rules:
  - username: 1..50 of [a-zA-Z0-9._-], no leading/trailing special character,
    no two special characters in a row
  - provider: 1..30 letters
Case is significant, so only whitespace is removed during normalization.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .. import lookups
from ..core.errors import InvalidDocumentError
from ..core.normalize import sanitize_input_preserve_case
from ..core.patterns import (
    UPI_PROVIDER,
    UPI_PROVIDER_MAX,
    UPI_USERNAME,
    UPI_USERNAME_EDGE,
    UPI_USERNAME_MAX,
    UPI_USERNAME_RUN,
)
from ..core.results import ErrorKind, UpiVpaValidationResult


def normalize(value: str) -> str:
    """Strip whitespace, keep case and hyphens."""
    return sanitize_input_preserve_case(value)


def _fail(error: str, reason: ErrorKind) -> UpiVpaValidationResult:
    return UpiVpaValidationResult(is_valid=False, error=error, reason=reason)


def _check(vpa: str) -> UpiVpaValidationResult:
    """Ordered checks on a normalized VPA (the empty-input check is the caller's)."""
    if "@" not in vpa:
        return _fail("UPI VPA must contain @ symbol", ErrorKind.STRUCTURAL_MISMATCH)

    parts = vpa.split("@")
    if len(parts) != 2:
        return _fail("UPI VPA must have exactly one @ symbol", ErrorKind.STRUCTURAL_MISMATCH)

    username, provider = parts

    if not username:
        return _fail("Username cannot be empty", ErrorKind.EMPTY_INPUT)
    if len(username) > UPI_USERNAME_MAX:
        return _fail("Username cannot be longer than 50 characters", ErrorKind.LENGTH_MISMATCH)
    if not UPI_USERNAME.fullmatch(username):
        return _fail(
            "Username can only contain letters, numbers, dots, hyphens, and underscores",
            ErrorKind.STRUCTURAL_MISMATCH,
        )
    if UPI_USERNAME_EDGE.search(username):
        return _fail(
            "Username cannot start or end with special characters",
            ErrorKind.BUSINESS_RULE_VIOLATION,
        )
    if UPI_USERNAME_RUN.search(username):
        return _fail(
            "Username cannot have consecutive special characters",
            ErrorKind.BUSINESS_RULE_VIOLATION,
        )

    if not provider:
        return _fail("Provider cannot be empty", ErrorKind.EMPTY_INPUT)
    if len(provider) > UPI_PROVIDER_MAX:
        return _fail("Provider cannot be longer than 30 characters", ErrorKind.LENGTH_MISMATCH)
    if not UPI_PROVIDER.fullmatch(provider):
        return _fail("Provider can only contain letters", ErrorKind.STRUCTURAL_MISMATCH)

    return UpiVpaValidationResult(is_valid=True, username=username, provider=provider)


def validate(value: str) -> bool:
    return _check(normalize(value)).is_valid


def validate_detailed(value: str) -> UpiVpaValidationResult:
    """
    Validate and explain the first failing check.

    Order: empty -> '@' present -> single '@' -> username (empty, length,
    charset, edges, runs) -> provider (empty, length, charset).
    """
    if not value:
        return _fail("UPI VPA cannot be empty", ErrorKind.EMPTY_INPUT)
    return _check(normalize(value))


def _split_valid(value: str) -> Tuple[str, str]:
    vpa = normalize(value)
    result = _check(vpa)
    if not result.is_valid:
        raise InvalidDocumentError("Invalid UPI VPA format")
    return result.username, result.provider


def extract_username(value: str) -> str:
    """Return the part before '@'; raises InvalidDocumentError if invalid."""
    return _split_valid(value)[0]


def extract_provider(value: str) -> str:
    """Return the part after '@'; raises InvalidDocumentError if invalid."""
    return _split_valid(value)[1]


def get_provider_name(provider: str) -> Optional[str]:
    return lookups.provider_name(provider)
