"""
Policy-driven text transformations for detected identifiers.

This module is the *second* stage of the pipeline:

  1) DETECT  - find spans of identifiers (regex + validators)
  2) ACT     - rewrite those spans according to the policy:
               - mask -> hide the value, keep a recognisable shape
               - drop -> remove entirely
               - hash -> irreversible, deterministic fingerprint
               - none -> do not modify

Security notes:
- 'hash' is *not* reversible. Set INDIAN_DOCS_SALT so equal values link
  across runs without exposing them.
- 'mask' for PAN and Aadhaar uses the same display masks as the validators.

Replacements are applied from **right to left** so earlier replacements don't
invalidate later character offsets.
"""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import os
from typing import Callable, Dict, List, Optional

from ..config import Policy
from ..core.errors import InvalidDocumentError
from ..detect.regex_backend import Span
from ..validators import aadhaar, pan, upi_vpa

MaskToken = "[REDACTED]"

SALT_ENV = "INDIAN_DOCS_SALT"


# ------------------------------
# Masking helpers (per type)
# ------------------------------

def _mask_pan(s: str) -> str:
    """'ABCDE1234F' -> 'ABC******F'"""
    try:
        return pan.mask(s)
    except InvalidDocumentError:
        return MaskToken


def _mask_aadhaar(s: str) -> str:
    """'2341 2341 2346' -> 'XXXX XXXX 2346'"""
    try:
        return aadhaar.mask(s)
    except InvalidDocumentError:
        return MaskToken


def _mask_upi_vpa(s: str) -> str:
    """
    Keep the first username character and the provider:
      'alice.w@okaxis' -> 'a***@okaxis'
    """
    try:
        username = upi_vpa.extract_username(s)
        provider = upi_vpa.extract_provider(s)
    except InvalidDocumentError:
        return MaskToken
    return f"{username[0]}***@{provider}"


def _mask_generic(_: str) -> str:
    return MaskToken


_MASKERS: Dict[str, Callable[[str], str]] = {
    "PAN": _mask_pan,
    "AADHAAR": _mask_aadhaar,
    "UPI_VPA": _mask_upi_vpa,
    "GSTIN": _mask_generic,
    "IFSC": _mask_generic,
}


def mask_value(doc_type: str, s: str) -> str:
    """Mask a single value with the strategy for its document type."""
    return _MASKERS.get(doc_type, _mask_generic)(s)


# ------------------------------
# Hashing
# ------------------------------

def _hash_value(doc_type: str, s: str, salt: Optional[str] = None) -> str:
    """
    SHA-256 over (salt | type | raw value), truncated: 'hash_3a5f09b1d2ab'.
    """
    salt = salt or os.getenv(SALT_ENV, "")
    h = hashlib.sha256()
    h.update(salt.encode("utf-8"))
    h.update(b"|")
    h.update(doc_type.encode("utf-8"))
    h.update(b"|")
    h.update(s.encode("utf-8"))
    return f"hash_{h.hexdigest()[:12]}"


# ------------------------------
# ActionEngine
# ------------------------------

@dataclass
class ActionEngine:
    """
    Apply policy-defined actions to detected spans.

        engine = ActionEngine(policy=cfg.policy)
        new_text = engine.apply(text, spans)
    """
    policy: Policy
    salt: Optional[str] = None  # optional override; INDIAN_DOCS_SALT is preferred

    def _replacement_for(self, sp: Span) -> Optional[str]:
        """
        Replacement text for one span, or None to keep the original.
        """
        action = self.policy.actions.get(sp.type, "none")

        if action == "none":
            return None
        if action == "mask":
            return mask_value(sp.type, sp.text)
        if action == "drop":
            return ""
        if action == "hash":
            return _hash_value(sp.type, sp.text, self.salt)

        # Unknown action keyword: hide the value
        return MaskToken

    def apply(self, text: str, spans: List[Span]) -> str:
        """
        Apply the policy actions to all spans within `text`.

        Args:
            text: Original input string
            spans: Detected spans (start/end refer to `text`)

        Returns:
            A new string with all policy-driven transformations applied.
        """
        if not spans:
            return text

        buff = list(text)
        for sp in sorted(spans, key=lambda s: s.start, reverse=True):
            repl = self._replacement_for(sp)
            if repl is None:
                continue
            buff[sp.start:sp.end] = list(repl)

        return "".join(buff)
