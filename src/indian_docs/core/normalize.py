"""
Input normalizers shared by every validator.

Users type identifiers in friendly shapes ("ABCDE 1234 F", "2341-2341-2346").
Validators only ever see the canonical form produced here.
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\s\-]")
_WHITESPACE = re.compile(r"\s")


def sanitize_input(s: str) -> str:
    """
    Remove whitespace and hyphens, then upper-case.

    Used for PAN, Aadhaar, GSTIN and IFSC, which are case-insensitive.
    """
    return _SEPARATORS.sub("", s).upper()


def sanitize_input_preserve_case(s: str) -> str:
    """
    Remove whitespace only.

    UPI VPAs keep their case and may legitimately contain hyphens in the username.
    """
    return _WHITESPACE.sub("", s)
