"""
PAN (Permanent Account Number), the income-tax identifier.

Format: 5 letters + 4 digits + 1 letter, e.g. ABCDE1234F. There is no check
character, so validation is purely structural.
"""

from __future__ import annotations

from ..core.errors import InvalidDocumentError
from ..core.normalize import sanitize_input
from ..core.patterns import PAN_PATTERN
from ..core.results import ErrorKind, PanValidationResult

PAN_LENGTH = 10


def normalize(value: str) -> str:
    """Strip spaces/hyphens and upper-case."""
    return sanitize_input(value)


def validate(value: str) -> bool:
    """Return True if `value` is a well-formed PAN after normalization."""
    return PAN_PATTERN.fullmatch(normalize(value)) is not None


def validate_detailed(value: str) -> PanValidationResult:
    """
    Validate and explain the first failing check.

    Order: empty -> length -> grammar.
    """
    if not value:
        return PanValidationResult(
            is_valid=False, error="PAN cannot be empty", reason=ErrorKind.EMPTY_INPUT
        )

    pan = normalize(value)

    if len(pan) != PAN_LENGTH:
        return PanValidationResult(
            is_valid=False,
            error="PAN must be 10 characters long",
            reason=ErrorKind.LENGTH_MISMATCH,
        )

    if not PAN_PATTERN.fullmatch(pan):
        return PanValidationResult(
            is_valid=False,
            error="PAN format is invalid. Expected format: 5 letters + 4 digits + 1 letter",
            reason=ErrorKind.STRUCTURAL_MISMATCH,
        )

    return PanValidationResult(is_valid=True, normalized_pan=pan)


def mask(value: str) -> str:
    """
    Hide the middle of a PAN: 'ABCDE1234F' -> 'ABC******F'.

    Raises:
        InvalidDocumentError: if `value` is not a valid PAN.
    """
    pan = normalize(value)
    if not validate(pan):
        raise InvalidDocumentError("Invalid PAN format")
    return f"{pan[:3]}{'*' * 6}{pan[9:]}"
