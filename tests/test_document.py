"""Tests for document snapshots."""

from __future__ import annotations

from pathlib import Path

from scrollmarks.document import DocumentSnapshot


def test_snapshot_records_offsets_for_every_line_break_style() -> None:
    snapshot = DocumentSnapshot.from_text("a\r\nbb\rccc\n")

    assert [line.text for line in snapshot] == ["a", "bb", "ccc", ""]
    assert [line.start for line in snapshot] == [0, 3, 6, 10]
    assert [line.number for line in snapshot] == [1, 2, 3, 4]
    assert snapshot.length == 10


def test_empty_text_has_one_line() -> None:
    snapshot = DocumentSnapshot.from_text("")

    assert len(snapshot) == 1
    assert snapshot[0].text == ""
    assert snapshot[0].start == 0


def test_from_lines_joins_with_newline() -> None:
    snapshot = DocumentSnapshot.from_lines(["one", "two"])

    assert [line.start for line in snapshot] == [0, 4]


def test_from_path_keeps_crlf_offsets(tmp_path: Path) -> None:
    path = tmp_path / "widget.cpp"
    path.write_bytes(b"// == A ==\r\nclass Widget {\r\n};\r\n")

    snapshot = DocumentSnapshot.from_path(path)

    assert snapshot[1].text == "class Widget {"
    assert snapshot[1].start == len("// == A ==\r\n")
