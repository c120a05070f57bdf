"""One module per document type, each exposing validate/validate_detailed/normalize."""

from . import aadhaar, gstin, ifsc, pan, upi_vpa

__all__ = ["aadhaar", "gstin", "ifsc", "pan", "upi_vpa"]
