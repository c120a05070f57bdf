"""
IFSC (Indian Financial System Code), the bank-branch routing code.

11 characters: 4-letter bank code + '0' + 6 alphanumeric branch characters,
e.g. SBIN0001234.
"""

from __future__ import annotations

from typing import Optional

from .. import lookups
from ..core.errors import InvalidDocumentError
from ..core.normalize import sanitize_input
from ..core.patterns import IFSC_BANK_CODE, IFSC_BRANCH_CODE, IFSC_PATTERN
from ..core.results import ErrorKind, IfscValidationResult

IFSC_LENGTH = 11


def normalize(value: str) -> str:
    """Strip spaces/hyphens and upper-case."""
    return sanitize_input(value)


def validate(value: str) -> bool:
    return IFSC_PATTERN.fullmatch(normalize(value)) is not None


def validate_detailed(value: str) -> IfscValidationResult:
    """
    Validate and explain the first failing check.

    Order: empty -> length -> bank code -> literal '0' -> branch code.
    """
    if not value:
        return IfscValidationResult(
            is_valid=False, error="IFSC cannot be empty", reason=ErrorKind.EMPTY_INPUT
        )

    ifsc = normalize(value)

    if len(ifsc) != IFSC_LENGTH:
        return IfscValidationResult(
            is_valid=False,
            error="IFSC must be 11 characters long",
            reason=ErrorKind.LENGTH_MISMATCH,
        )

    bank_code = ifsc[:4]
    if not IFSC_BANK_CODE.fullmatch(bank_code):
        return IfscValidationResult(
            is_valid=False,
            error="Bank code must be 4 letters",
            reason=ErrorKind.STRUCTURAL_MISMATCH,
        )

    if ifsc[4] != "0":
        return IfscValidationResult(
            is_valid=False,
            error="5th character of IFSC must be 0",
            reason=ErrorKind.BUSINESS_RULE_VIOLATION,
        )

    branch_code = ifsc[5:]
    if not IFSC_BRANCH_CODE.fullmatch(branch_code):
        return IfscValidationResult(
            is_valid=False,
            error="Branch code must be 6 alphanumeric characters",
            reason=ErrorKind.STRUCTURAL_MISMATCH,
        )

    return IfscValidationResult(is_valid=True, bank_code=bank_code, branch_code=branch_code)


def _require_valid(value: str) -> str:
    ifsc = normalize(value)
    if not validate(ifsc):
        raise InvalidDocumentError("Invalid IFSC format")
    return ifsc


def extract_bank_code(value: str) -> str:
    """Return the 4-letter bank code; raises InvalidDocumentError if invalid."""
    return _require_valid(value)[:4]


def extract_branch_code(value: str) -> str:
    """Return the 6-character branch code; raises InvalidDocumentError if invalid."""
    return _require_valid(value)[5:]


def get_bank_name(bank_code: str) -> Optional[str]:
    return lookups.bank_name(bank_code)
