"""
Static name tables for bank codes, GST state codes and UPI handles.

The tables ship as YAML under `indian_docs/data/` and are read once at import.
They are exposed as read-only mappings; nothing mutates them afterwards.
"""

from __future__ import annotations

import logging
from importlib import resources
from types import MappingProxyType
from typing import Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

_DATA_PACKAGE = "indian_docs.data"


def _load_table(fname: str, key: str) -> Mapping[str, str]:
    text = resources.files(_DATA_PACKAGE).joinpath(fname).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    table = {str(k): str(v) for k, v in (data.get(key, {}) or {}).items()}
    logger.debug("loaded %d entries from %s", len(table), fname)
    return MappingProxyType(table)


BANK_NAMES: Mapping[str, str] = _load_table("banks.yaml", "banks")
STATE_NAMES: Mapping[str, str] = _load_table("states.yaml", "states")
UPI_PROVIDER_NAMES: Mapping[str, str] = _load_table("upi_providers.yaml", "providers")


def bank_name(bank_code: str) -> Optional[str]:
    """Name for a 4-letter IFSC bank code, case-insensitive."""
    return BANK_NAMES.get(bank_code.upper())


def state_name(state_code: str) -> Optional[str]:
    """Name for a 2-digit GST state code."""
    return STATE_NAMES.get(state_code)


def provider_name(handle: str) -> Optional[str]:
    """Name for a UPI handle such as 'okaxis', case-insensitive."""
    return UPI_PROVIDER_NAMES.get(handle.lower())
