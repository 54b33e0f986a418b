"""Full-document scan that turns a snapshot into an ordered marker list."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from .classifier import LineClassifier
from .document import DocumentSnapshot, SnapshotLine
from .logging import get_logger
from .models import FeatureFlags, LanguageMode, Marker


class DocumentScanner:
    """Classifies every line of a snapshot, in order, from scratch.

    Scans never raise: a line whose evaluation fails is logged and skipped,
    and a failure while walking the snapshot returns what was collected so
    far.
    """

    def __init__(
        self, mode: LanguageMode, classifier: LineClassifier | None = None
    ) -> None:
        self.mode = mode
        self.classifier = classifier or LineClassifier(mode)
        self.logger = get_logger("pipeline")

    def scan(self, snapshot: Iterable[SnapshotLine], flags: FeatureFlags) -> List[Marker]:
        markers: List[Marker] = []
        try:
            for line in snapshot:
                marker = self._classify(line, flags)
                if marker is not None:
                    markers.append(marker)
        except Exception as exc:
            self.logger.warning(
                "Scan aborted after %d markers: %s", len(markers), exc
            )
            return markers

        self.logger.debug("Scan produced %d markers (%s)", len(markers), self.mode.value)
        return markers

    def _classify(self, line: SnapshotLine, flags: FeatureFlags) -> Marker | None:
        try:
            marker = self.classifier.classify(line.text, flags)
        except Exception as exc:
            self.logger.warning("Skipping line %d: %s", line.number, exc)
            return None
        if marker is None:
            return None
        return replace(marker, offset=line.start, line=line.number)


def scan_text(
    text: str, mode: LanguageMode, flags: FeatureFlags | None = None
) -> List[Marker]:
    """Convenience wrapper: snapshot ``text`` and scan it once."""
    snapshot = DocumentSnapshot.from_text(text)
    return DocumentScanner(mode).scan(snapshot, flags or FeatureFlags())


__all__ = ["DocumentScanner", "scan_text"]
