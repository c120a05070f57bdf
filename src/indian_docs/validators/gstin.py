"""
GSTIN (Goods and Services Tax Identification Number).

Structure, 15 characters:
  [0:2]   state code (must be an issued code)
  [2:12]  the holder's PAN, validated with the PAN validator itself
  [12]    entity code, 1-9 or A-Z
  [13]    the literal 'Z'
  [14]    mod-36 check character over [0:14]
"""

from __future__ import annotations

from typing import Optional

from .. import lookups
from ..core.checksums import gst_checksum_ok
from ..core.errors import InvalidDocumentError
from ..core.normalize import sanitize_input
from ..core.patterns import GSTIN_ENTITY_CODE, VALID_STATE_CODES
from ..core.results import ErrorKind, GstinValidationResult
from . import pan

GSTIN_LENGTH = 15


def normalize(value: str) -> str:
    """Strip spaces/hyphens and upper-case."""
    return sanitize_input(value)


def _first_failure(gstin: str) -> Optional[GstinValidationResult]:
    """Run the ordered checks on a normalized GSTIN; None means it passed."""
    if len(gstin) != GSTIN_LENGTH:
        return GstinValidationResult(
            is_valid=False,
            error="GSTIN must be 15 characters long",
            reason=ErrorKind.LENGTH_MISMATCH,
        )

    if gstin[:2] not in VALID_STATE_CODES:
        return GstinValidationResult(
            is_valid=False,
            error="Invalid state code in GSTIN",
            reason=ErrorKind.BUSINESS_RULE_VIOLATION,
        )

    if not pan.validate(gstin[2:12]):
        return GstinValidationResult(
            is_valid=False,
            error="Invalid PAN in GSTIN",
            reason=ErrorKind.STRUCTURAL_MISMATCH,
        )

    if not GSTIN_ENTITY_CODE.fullmatch(gstin[12]):
        return GstinValidationResult(
            is_valid=False,
            error="Invalid entity code in GSTIN",
            reason=ErrorKind.STRUCTURAL_MISMATCH,
        )

    if gstin[13] != "Z":
        return GstinValidationResult(
            is_valid=False,
            error="GSTIN must have Z as 14th character",
            reason=ErrorKind.BUSINESS_RULE_VIOLATION,
        )

    if not gst_checksum_ok(gstin):
        return GstinValidationResult(
            is_valid=False,
            error="GSTIN checksum validation failed",
            reason=ErrorKind.CHECKSUM_FAILURE,
        )

    return None


def validate(value: str) -> bool:
    """Return True if `value` passes every structural check and the checksum."""
    return _first_failure(normalize(value)) is None


def validate_detailed(value: str) -> GstinValidationResult:
    """
    Validate and explain the first failing check.

    Order: empty -> length -> state code -> embedded PAN -> entity code ->
    literal 'Z' -> checksum.
    """
    if not value:
        return GstinValidationResult(
            is_valid=False, error="GSTIN cannot be empty", reason=ErrorKind.EMPTY_INPUT
        )

    gstin = normalize(value)
    failure = _first_failure(gstin)
    if failure is not None:
        return failure

    return GstinValidationResult(is_valid=True, state_code=gstin[:2], pan_number=gstin[2:12])


def _require_valid(value: str) -> str:
    gstin = normalize(value)
    if _first_failure(gstin) is not None:
        raise InvalidDocumentError("Invalid GSTIN format")
    return gstin


def extract_pan(value: str) -> str:
    """
    Return the PAN embedded in a valid GSTIN.

    Raises:
        InvalidDocumentError: if the GSTIN fails validation, checksum included.
    """
    return _require_valid(value)[2:12]


def extract_state_code(value: str) -> str:
    """
    Return the 2-digit state code of a valid GSTIN.

    Raises:
        InvalidDocumentError: if the GSTIN fails validation, checksum included.
    """
    return _require_valid(value)[:2]


def get_state_name(state_code: str) -> Optional[str]:
    return lookups.state_name(state_code)
