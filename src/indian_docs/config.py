from __future__ import annotations

from pathlib import Path
from typing import Dict, Literal, Optional
import yaml
from pydantic import BaseModel, Field, field_validator

# ---- Document types understood by the scanner ----
DocumentType = Literal["PAN", "AADHAAR", "GSTIN", "IFSC", "UPI_VPA"]

Action = Literal["mask", "drop", "hash", "none"]

DEFAULT_ACTIONS: Dict[str, str] = {
    "PAN": "mask",
    "AADHAAR": "mask",
    "GSTIN": "mask",
    "IFSC": "none",     # branch codes are public routing data
    "UPI_VPA": "mask",
}


# ---- Policy (what to do with each document type when masking text) ----
class Policy(BaseModel):
    actions: Dict[DocumentType, Action] = Field(default_factory=lambda: dict(DEFAULT_ACTIONS))
    min_confidence: float = Field(default=0.75, ge=0.0, le=1.0)

    @field_validator("actions", mode="before")
    @classmethod
    def _merge_with_defaults(cls, v):
        # types missing from a user mapping keep their default action
        if isinstance(v, dict):
            return {**DEFAULT_ACTIONS, **v}
        return v


# ---- Detector toggles (one per document type) ----
class Detectors(BaseModel):
    pan: bool = True
    aadhaar: bool = True
    gstin: bool = True
    ifsc: bool = True
    upi_vpa: bool = True

    def enabled_types(self) -> set[str]:
        return {name.upper() for name, on in self.model_dump().items() if on}

# ---- Root config ----
class IndianDocsConfig(BaseModel):
    policy: Policy = Field(default_factory=Policy)
    detectors: Detectors = Field(default_factory=Detectors)

# ---- Loader ----
def load_config(path: Optional[Path]) -> IndianDocsConfig:
    if not path:
        return IndianDocsConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return IndianDocsConfig(**data)
