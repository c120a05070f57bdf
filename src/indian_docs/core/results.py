"""
Immutable results returned by `validate_detailed`.

Each document type has its own result shape. A result is either valid (with the
extracted fields filled in) or invalid (with exactly one `error` message and
the matching `reason`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of the first failing check, in evaluation order."""
    EMPTY_INPUT = "empty_input"
    LENGTH_MISMATCH = "length_mismatch"
    STRUCTURAL_MISMATCH = "structural_mismatch"
    BUSINESS_RULE_VIOLATION = "business_rule_violation"
    CHECKSUM_FAILURE = "checksum_failure"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None
    reason: Optional[ErrorKind] = None


@dataclass(frozen=True)
class PanValidationResult(ValidationResult):
    normalized_pan: Optional[str] = None


@dataclass(frozen=True)
class AadhaarValidationResult(ValidationResult):
    masked_aadhaar: Optional[str] = None


@dataclass(frozen=True)
class GstinValidationResult(ValidationResult):
    state_code: Optional[str] = None
    pan_number: Optional[str] = None


@dataclass(frozen=True)
class IfscValidationResult(ValidationResult):
    bank_code: Optional[str] = None
    branch_code: Optional[str] = None


@dataclass(frozen=True)
class UpiVpaValidationResult(ValidationResult):
    username: Optional[str] = None
    provider: Optional[str] = None
