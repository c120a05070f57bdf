from .actions import ActionEngine, mask_value
from .pipeline import FileFinding, Pipeline, ScanResult

__all__ = ["ActionEngine", "mask_value", "FileFinding", "Pipeline", "ScanResult"]
