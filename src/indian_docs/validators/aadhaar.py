"""
Aadhaar, the 12-digit UIDAI number.

The last digit is a Verhoeff check digit over the first eleven. Numbers never
start with 0 or 1, and a run of twelve identical digits is never issued.
"""

from __future__ import annotations

from ..core.checksums import verhoeff_ok
from ..core.errors import InvalidDocumentError
from ..core.normalize import sanitize_input
from ..core.patterns import AADHAAR_PATTERN, REPEATED_DIGITS
from ..core.results import AadhaarValidationResult, ErrorKind

AADHAAR_LENGTH = 12
MASK_PREFIX = "XXXX XXXX "


def normalize(value: str) -> str:
    """Strip spaces/hyphens (upper-casing is harmless for digits)."""
    return sanitize_input(value)


def validate(value: str) -> bool:
    """
    Return True if `value` is a valid Aadhaar number.

    Cheap structural checks run first; the Verhoeff pass only happens for
    candidates that could possibly be real.
    """
    number = normalize(value)
    if not AADHAAR_PATTERN.fullmatch(number):
        return False
    if REPEATED_DIGITS.fullmatch(number):
        return False
    if number[0] in "01":
        return False
    return verhoeff_ok(number)


def validate_detailed(value: str) -> AadhaarValidationResult:
    """
    Validate and explain the first failing check.

    Order: empty -> length -> digits only -> leading digit -> checksum.
    Repeated-digit numbers are reported as a checksum failure so this function
    and `validate` always agree.
    """
    if not value:
        return AadhaarValidationResult(
            is_valid=False, error="Aadhaar cannot be empty", reason=ErrorKind.EMPTY_INPUT
        )

    number = normalize(value)

    if len(number) != AADHAAR_LENGTH:
        return AadhaarValidationResult(
            is_valid=False,
            error="Aadhaar must be 12 digits long",
            reason=ErrorKind.LENGTH_MISMATCH,
        )

    if not AADHAAR_PATTERN.fullmatch(number):
        return AadhaarValidationResult(
            is_valid=False,
            error="Aadhaar must contain only digits",
            reason=ErrorKind.STRUCTURAL_MISMATCH,
        )

    if number[0] in "01":
        return AadhaarValidationResult(
            is_valid=False,
            error="Aadhaar cannot start with 0 or 1",
            reason=ErrorKind.BUSINESS_RULE_VIOLATION,
        )

    if REPEATED_DIGITS.fullmatch(number) or not verhoeff_ok(number):
        return AadhaarValidationResult(
            is_valid=False,
            error="Aadhaar checksum validation failed",
            reason=ErrorKind.CHECKSUM_FAILURE,
        )

    return AadhaarValidationResult(is_valid=True, masked_aadhaar=_masked(number))


def _masked(number: str) -> str:
    return f"{MASK_PREFIX}{number[8:]}"


def _require_valid(value: str) -> str:
    number = normalize(value)
    if not validate(number):
        raise InvalidDocumentError("Invalid Aadhaar format")
    return number


def mask(value: str) -> str:
    """
    Show only the last four digits: 'XXXX XXXX 2346'.

    Raises:
        InvalidDocumentError: if `value` is not a valid Aadhaar number.
    """
    return _masked(_require_valid(value))


def format(value: str) -> str:
    """
    Group as 4-4-4 with single spaces: '2341 2341 2346'.

    Raises:
        InvalidDocumentError: if `value` is not a valid Aadhaar number.
    """
    number = _require_valid(value)
    return f"{number[:4]} {number[4:8]} {number[8:]}"
