"""
Interactive controls for rendered OCR documents.

Page navigation, whole-document text extraction, clipboard copy and
transient notices on top of an lxml document tree.
"""

from .controller import ControlsConfig, CopyResult, OcrControls

__all__ = [
    "ControlsConfig",
    "CopyResult",
    "OcrControls",
]
