"""Structural markers for scrollbar overviews of C-family and C# sources."""

from .classifier import LineClassifier, classify_line
from .document import DocumentSnapshot, SnapshotLine
from .models import FeatureFlags, LanguageMode, Marker, MarkerKind
from .overlay import MarkerOverlay, ScanTrigger
from .pipeline import DocumentScanner, scan_text

__all__ = [
    "DocumentScanner",
    "DocumentSnapshot",
    "FeatureFlags",
    "LanguageMode",
    "LineClassifier",
    "Marker",
    "MarkerKind",
    "MarkerOverlay",
    "ScanTrigger",
    "SnapshotLine",
    "classify_line",
    "scan_text",
]
