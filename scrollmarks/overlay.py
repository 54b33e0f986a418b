"""Per-document host adapter that re-scans on every trigger."""

from __future__ import annotations

from enum import Enum
from typing import Callable, List

from .document import DocumentSnapshot
from .logging import get_logger
from .models import FeatureFlags, LanguageMode, Marker
from .pipeline import DocumentScanner
from .stores import SettingsStore

MarkerSink = Callable[[List[Marker]], None]
SnapshotProvider = Callable[[], DocumentSnapshot]


class ScanTrigger(str, Enum):
    """Host events that cause a full re-scan."""

    TEXT_CHANGED = "text_changed"
    LAYOUT_CHANGED = "layout_changed"
    TRACK_SPAN_CHANGED = "track_span_changed"
    SETTINGS_CHANGED = "settings_changed"


class MarkerOverlay:
    """Owns one document's language mode and publishes its markers.

    Every trigger clears the previous output and hands a freshly computed
    marker list to ``sink``. Bursts of host events are not coalesced here.
    """

    def __init__(
        self,
        snapshot_provider: SnapshotProvider,
        mode: LanguageMode,
        sink: MarkerSink,
        *,
        settings: SettingsStore | None = None,
        flags: FeatureFlags | None = None,
    ) -> None:
        self._snapshot_provider = snapshot_provider
        self._sink = sink
        self._scanner = DocumentScanner(mode)
        self._flags = flags or (settings.flags if settings is not None else FeatureFlags())
        self._unsubscribe: Callable[[], None] | None = None
        self._disposed = False
        self.markers: List[Marker] = []
        self.logger = get_logger("overlay")

        if settings is not None:
            self._unsubscribe = settings.subscribe(self.on_settings_changed)

        self.refresh(ScanTrigger.TEXT_CHANGED)

    @property
    def mode(self) -> LanguageMode:
        return self._scanner.mode

    @property
    def flags(self) -> FeatureFlags:
        return self._flags

    @property
    def disposed(self) -> bool:
        return self._disposed

    def on_text_changed(self) -> None:
        self.refresh(ScanTrigger.TEXT_CHANGED)

    def on_layout_changed(self) -> None:
        self.refresh(ScanTrigger.LAYOUT_CHANGED)

    def on_track_span_changed(self) -> None:
        self.refresh(ScanTrigger.TRACK_SPAN_CHANGED)

    def on_settings_changed(self, flags: FeatureFlags) -> None:
        self._flags = flags
        self.refresh(ScanTrigger.SETTINGS_CHANGED)

    def refresh(self, trigger: ScanTrigger) -> None:
        """Rebuild the marker list from the current snapshot."""
        if self._disposed:
            return

        self.markers = []
        try:
            snapshot = self._snapshot_provider()
            self.markers = self._scanner.scan(snapshot, self._flags)
        except Exception as exc:
            self.logger.warning("Error updating overlay after %s: %s", trigger.value, exc)
        self._sink(list(self.markers))

    def dispose(self) -> None:
        if self._disposed:
            return
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._disposed = True


__all__ = ["MarkerOverlay", "MarkerSink", "ScanTrigger", "SnapshotProvider"]
