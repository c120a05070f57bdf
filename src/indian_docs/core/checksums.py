"""
Checksum algorithms behind the Aadhaar and GSTIN validators.

Why this file exists
--------------------
A format regex accepts any 12 digits or any well-shaped 15 characters. The
check digit/character is what separates a real identifier from a typo, so
these two functions decide most accept/reject outcomes.

Design principles
-----------------
- **Pure functions**: no state, safe to call from any thread.
- **Fast**: O(n) over the candidate, and n is at most 15.
- **Two flavours**: the `*_ok` predicates never raise; the generators raise
  `InvalidDocumentError` because they cannot return a meaningful value.
"""

from __future__ import annotations

from typing import List

from .errors import InvalidDocumentError

_DIGITS = "0123456789"
_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# ---- Verhoeff (dihedral group D5) ----------------------------------------------------------

# Multiplication table
_D = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)

# Permutation table
_P = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 5, 7, 6, 2, 8, 3, 0, 9, 4),
    (5, 8, 0, 3, 7, 9, 6, 1, 4, 2),
    (8, 9, 1, 6, 0, 4, 3, 5, 2, 7),
    (9, 4, 5, 3, 1, 2, 6, 8, 7, 0),
    (4, 2, 8, 6, 5, 7, 3, 9, 0, 1),
    (2, 7, 9, 3, 8, 0, 6, 4, 1, 5),
    (7, 0, 4, 6, 9, 1, 3, 2, 5, 8),
)

# Inverse table
_INV = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)


def _reversed_digits(s: str) -> List[int] | None:
    if not s or any(ch not in _DIGITS for ch in s):
        return None
    return [ord(ch) - 48 for ch in reversed(s)]  # '0' -> 48


def verhoeff_ok(s: str) -> bool:
    """
    Validate a digit string whose last digit is a Verhoeff check digit.

    Verhoeff catches every single-digit error and every adjacent transposition,
    which is why UIDAI chose it for Aadhaar.

    Args:
        s: Digits only, check digit last.

    Returns:
        True if the accumulator ends at 0; False otherwise (including empty or
        non-digit input).
    """
    digits = _reversed_digits(s)
    if digits is None:
        return False

    c = 0
    for i, d in enumerate(digits):
        c = _D[c][_P[i % 8][d]]
    return c == 0


def verhoeff_check_digit(s: str) -> str:
    """
    Compute the Verhoeff check digit for `s` (which must not include one).

    The permutation row is shifted by one compared to `verhoeff_ok` because the
    check digit will occupy position 0 once appended.

    Raises:
        InvalidDocumentError: on empty or non-digit input.
    """
    if not s:
        raise InvalidDocumentError("Input cannot be empty")
    digits = _reversed_digits(s)
    if digits is None:
        raise InvalidDocumentError("Input must contain only digits")

    c = 0
    for i, d in enumerate(digits):
        c = _D[c][_P[(i + 1) % 8][d]]
    return str(_INV[c])


# ---- GST mod-36 ----------------------------------------------------------------------------

def _char_value(ch: str) -> int:
    if ch in _DIGITS:
        return ord(ch) - 48
    if ch in _ALPHABET:
        return ord(ch) - 55  # ord('A') == 65 -> 10
    raise InvalidDocumentError(f"Invalid character in input: {ch}")


def gst_check_char(s: str) -> str:
    """
    Compute the GSTIN check character over the first 14 characters.

    Steps:
      1) Map 0-9 to 0..9 and A-Z to 10..35.
      2) Walk right to left, weighting alternately by 2 and 1 (rightmost gets 2).
      3) Fold each product into base 36: quotient + remainder.
      4) Check value is (36 - sum % 36) % 36, rendered back into the alphabet.

    Raises:
        InvalidDocumentError: if `s` is not exactly 14 characters of [0-9A-Z].
    """
    if len(s) != 14:
        raise InvalidDocumentError("Input must be exactly 14 characters")

    factor = 2
    total = 0
    for ch in reversed(s):
        product = factor * _char_value(ch)
        factor = 1 if factor == 2 else 2
        total += (product // 36) + (product % 36)

    check = (36 - total % 36) % 36
    if check < 10:
        return str(check)
    return _ALPHABET[check - 10]


def gst_checksum_ok(s: str) -> bool:
    """
    Validate the 15th character of a GSTIN against the first 14.

    Expects canonical input (see `sanitize_input`); lower-case letters count as
    invalid characters here.

    Returns:
        True if the check character matches; False on any length or character
        problem.
    """
    if len(s) != 15:
        return False
    try:
        return gst_check_char(s[:14]) == s[14]
    except InvalidDocumentError:
        return False
