"""Normalizers, grammars, checksums and result types shared by all validators."""

from .checksums import gst_check_char, gst_checksum_ok, verhoeff_check_digit, verhoeff_ok
from .errors import InvalidDocumentError
from .normalize import sanitize_input, sanitize_input_preserve_case
from .results import (
    AadhaarValidationResult,
    ErrorKind,
    GstinValidationResult,
    IfscValidationResult,
    PanValidationResult,
    UpiVpaValidationResult,
    ValidationResult,
)

__all__ = [
    "gst_check_char",
    "gst_checksum_ok",
    "verhoeff_check_digit",
    "verhoeff_ok",
    "InvalidDocumentError",
    "sanitize_input",
    "sanitize_input_preserve_case",
    "AadhaarValidationResult",
    "ErrorKind",
    "GstinValidationResult",
    "IfscValidationResult",
    "PanValidationResult",
    "UpiVpaValidationResult",
    "ValidationResult",
]
