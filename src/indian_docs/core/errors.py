from __future__ import annotations


class InvalidDocumentError(ValueError):
    """Raised when an operation needs a valid identifier and did not get one."""
