"""
Compiled grammars for each document type.

All patterns are used with `fullmatch` against already-normalized input, and
character classes are spelled out (`[0-9]`, not `\\d`) so non-ASCII digits
never slip through.
"""

from __future__ import annotations

import re
from typing import FrozenSet

# PAN: 5 letters + 4 digits + 1 letter
PAN_PATTERN = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")

# Aadhaar: 12 digits
AADHAAR_PATTERN = re.compile(r"[0-9]{12}")
REPEATED_DIGITS = re.compile(r"([0-9])\1{11}")

# GSTIN: state + PAN + entity + 'Z' + checksum
GSTIN_PATTERN = re.compile(r"[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]")
GSTIN_ENTITY_CODE = re.compile(r"[1-9A-Z]")

# IFSC: 4 letters + '0' + 6 alphanumeric
IFSC_PATTERN = re.compile(r"[A-Z]{4}0[A-Z0-9]{6}")
IFSC_BANK_CODE = re.compile(r"[A-Z]{4}")
IFSC_BRANCH_CODE = re.compile(r"[A-Z0-9]{6}")

# UPI VPA: username@provider
UPI_VPA_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z]+")
UPI_USERNAME = re.compile(r"[a-zA-Z0-9._-]+")
UPI_USERNAME_EDGE = re.compile(r"^[._-]|[._-]\Z")
UPI_USERNAME_RUN = re.compile(r"[._-]{2,}")
UPI_PROVIDER = re.compile(r"[a-zA-Z]+")

UPI_USERNAME_MAX = 50
UPI_PROVIDER_MAX = 30

# GST state codes currently issued (01-37 plus 97 for other territory).
VALID_STATE_CODES: FrozenSet[str] = frozenset(
    [f"{n:02d}" for n in range(1, 38)] + ["97"]
)
