"""Immutable document snapshots consumed by the scan pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence, Tuple

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class SnapshotLine:
    """One line of a snapshot without its line break."""

    number: int
    start: int
    text: str


@dataclass(frozen=True)
class DocumentSnapshot:
    """Ordered, read-only view of a buffer split into lines."""

    lines: Tuple[SnapshotLine, ...]
    length: int = 0

    @classmethod
    def from_text(cls, text: str) -> "DocumentSnapshot":
        """Split ``text`` on CRLF, CR or LF, recording each line's start offset."""
        lines = []
        start = 0
        number = 1
        for match in _LINE_BREAK.finditer(text):
            lines.append(SnapshotLine(number=number, start=start, text=text[start : match.start()]))
            start = match.end()
            number += 1
        lines.append(SnapshotLine(number=number, start=start, text=text[start:]))
        return cls(lines=tuple(lines), length=len(text))

    @classmethod
    def from_lines(cls, lines: Sequence[str], newline: str = "\n") -> "DocumentSnapshot":
        return cls.from_text(newline.join(lines))

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> "DocumentSnapshot":
        # newline="" keeps CRLF pairs intact so offsets match the bytes on disk.
        with path.open("r", encoding=encoding, errors="replace", newline="") as handle:
            return cls.from_text(handle.read())

    def __iter__(self) -> Iterator[SnapshotLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> SnapshotLine:
        return self.lines[index]


__all__ = ["DocumentSnapshot", "SnapshotLine"]
