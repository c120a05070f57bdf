"""
Regex-based detection of Indian identifiers in free text.

What this does
--------------
- Loads the YAML rule pack (`indian_docs/detect/rulesets/india.yaml`).
- Compiles each pattern and applies optional **normalizers** (strip separators)
  and **validators** (the full PAN/Aadhaar/GSTIN/IFSC/UPI validators).
- Emits `Span` records with offsets into the original text.

Why validators?
---------------
A 12-digit phone-ish number looks like an Aadhaar and any 15 alphanumerics can
look like a GSTIN. Running the real validator (Verhoeff, mod-36, state codes)
on every candidate removes most false positives at almost no cost.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
import logging
import re
import yaml
from importlib import resources

from ..core.normalize import sanitize_input, sanitize_input_preserve_case
from ..validators import aadhaar, gstin, ifsc, pan, upi_vpa

logger = logging.getLogger(__name__)


# ---- Data model returned to the pipeline -------------------------------------------------

@dataclass(frozen=True)
class Span:
    """
    A detected identifier in text.

    Attributes:
        start: Start character offset (inclusive).
        end:   End character offset (exclusive).
        text:  Raw matched text slice (pre-normalization).
        type:  Document type ('PAN', 'AADHAAR', 'GSTIN', 'IFSC', 'UPI_VPA').
        confidence: Rule-assigned confidence.
    """
    start: int
    end: int
    text: str
    type: str
    confidence: float


# ---- Registry of named normalizers/validators --------------------------------------------

# Map validator names (as used in YAML) to callables.
_VALIDATORS: Dict[str, Callable[[str], bool]] = {
    "pan": pan.validate,
    "aadhaar": aadhaar.validate,  # Verhoeff
    "gstin": gstin.validate,      # embedded PAN + mod-36
    "ifsc": ifsc.validate,
    "upi_vpa": upi_vpa.validate,
}

# Map normalizer names (as used in YAML) to callables.
_NORMALIZERS: Dict[str, Callable[[str], str]] = {
    "strip_spaces_dashes": sanitize_input,
    "strip_spaces": sanitize_input_preserve_case,
}

_RULESET_PACKAGE = "indian_docs.detect.rulesets"


# ---- Backend -----------------------------------------------------------------------------

class RegexBackend:
    """
    Load rule packs and run compiled regex against input text.

    Each rule can specify:
      - regex:       the pattern string
      - flags:       optional list of flags ["I", "M", "S"]
      - normalize:   names of normalizers to apply before validation
      - validators:  names of validators to gate the match
      - confidence:  float score assigned to matches from this rule
      - type:        override the emitted document type (defaults to YAML key)

    Args:
        types: Document types to keep; None keeps every rule in the pack.
        packs: Rule pack file names to load from the rulesets package.
    """

    def __init__(
        self,
        types: Optional[Iterable[str]] = None,
        packs: Tuple[str, ...] = ("india.yaml",),
    ) -> None:
        self.rules: List[Tuple[str, re.Pattern, Dict[str, Any]]] = []
        wanted = {t.upper() for t in types} if types is not None else None

        for fname in packs:
            text = resources.files(_RULESET_PACKAGE).joinpath(fname).read_text(encoding="utf-8")
            data = yaml.safe_load(text) or {}
            for key, spec in (data.get("patterns", {}) or {}).items():
                compiled = self._compile_rule(key, spec)
                if not compiled:
                    logger.debug("skipping malformed rule %s in %s", key, fname)
                    continue
                if wanted is not None and compiled[2]["type"] not in wanted:
                    continue
                self.rules.append(compiled)

        logger.debug("loaded %d regex rules", len(self.rules))

    # -- Compilation helpers ----------------------------------------------------------------

    def _compile_rule(
        self, key: str, spec: Any
    ) -> Tuple[str, re.Pattern, Dict[str, Any]] | None:
        """
        Turn a YAML rule into a compiled regex and a metadata dict.

        Supports two YAML shapes:
          1) simple string  -> the regex, case-insensitive, no validators
          2) dict           -> full options (regex/flags/normalize/validators/...)
        """
        if isinstance(spec, str):
            meta: Dict[str, Any] = {
                "type": key,
                "validators": [],
                "normalize": [],
                "confidence": 0.5,  # unvalidated shape match
            }
            return key, re.compile(spec, re.I), meta

        if not isinstance(spec, dict) or "regex" not in spec:
            return None

        flags = 0
        for f in spec.get("flags", ["I"]):
            if f == "I":
                flags |= re.I
            elif f == "M":
                flags |= re.M
            elif f == "S":
                flags |= re.S

        pat = re.compile(spec["regex"], flags)

        meta = {
            "type": spec.get("type", key),
            "validators": spec.get("validators", []),
            "normalize": spec.get("normalize", []),
            "confidence": float(spec.get("confidence", 0.99)),
        }
        return key, pat, meta

    # -- Execution helpers ------------------------------------------------------------------

    def _apply_normalizers(self, text: str, names: List[str]) -> str:
        """Apply 0..N normalizers in order. Unknown names are ignored."""
        for n in names:
            func = _NORMALIZERS.get(n)
            if func:
                text = func(text)
        return text

    def _validators_ok(self, text: str, names: List[str]) -> bool:
        """Return True only if all requested validators pass. Unknown names are skipped."""
        for name in names:
            fn = _VALIDATORS.get(name)
            if fn and not fn(text):
                return False
        return True

    # -- Public API -------------------------------------------------------------------------

    def detect(self, text: str) -> List[Span]:
        """
        Run all compiled rules against the input text.

        Order of operations per match:
          1) regex match -> raw substring
          2) normalize   -> canonical form
          3) validate    -> drop the candidate if any validator fails
          4) emit Span   -> raw substring, configured type/confidence
        """
        spans: List[Span] = []

        for key, pat, meta in self.rules:
            for m in pat.finditer(text):
                raw = m.group(0)
                norm = self._apply_normalizers(raw, meta["normalize"])

                if not self._validators_ok(norm, meta["validators"]):
                    logger.debug("rejected %s candidate at %d", key, m.start())
                    continue

                spans.append(
                    Span(
                        start=m.start(),
                        end=m.end(),
                        text=raw,
                        type=meta["type"],
                        confidence=meta["confidence"],
                    )
                )

        return spans
