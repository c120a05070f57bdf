"""
Offline validators for Indian identification and payment codes.

Covers PAN, Aadhaar, GSTIN, IFSC and UPI VPA. Nothing here talks to the
network; validity means "well-formed and checksum-correct", not "issued".

    from indian_docs import gstin
    gstin.validate("29ABCDE1234F1ZW")
"""

from .core import (
    AadhaarValidationResult,
    ErrorKind,
    GstinValidationResult,
    IfscValidationResult,
    InvalidDocumentError,
    PanValidationResult,
    UpiVpaValidationResult,
    ValidationResult,
    gst_check_char,
    gst_checksum_ok,
    sanitize_input,
    sanitize_input_preserve_case,
    verhoeff_check_digit,
    verhoeff_ok,
)
from .validators import aadhaar, gstin, ifsc, pan, upi_vpa

__version__ = "0.1.0"

__all__ = [
    "aadhaar",
    "gstin",
    "ifsc",
    "pan",
    "upi_vpa",
    "AadhaarValidationResult",
    "ErrorKind",
    "GstinValidationResult",
    "IfscValidationResult",
    "InvalidDocumentError",
    "PanValidationResult",
    "UpiVpaValidationResult",
    "ValidationResult",
    "gst_check_char",
    "gst_checksum_ok",
    "sanitize_input",
    "sanitize_input_preserve_case",
    "verhoeff_check_digit",
    "verhoeff_ok",
    "__version__",
]
