"""Kludge (control line) extraction from decoded message bodies.

Recognised lines:
    AREA:<tag>          echomail area, first line only
    SEEN-BY: <nodes>    echomail distribution list
    ^A<NAME>[:] <value> control lines (MSGID, PID, PATH, ...)

Everything else is body text.
"""

from __future__ import annotations

from enum import Enum

KLUDGE_MARKER = "\x01"
AREA_PREFIX = "AREA:"
SEEN_BY_PREFIX = "SEEN-BY:"


class LineKind(Enum):
    AREA = "area"
    SEEN_BY = "seen-by"
    KLUDGE = "kludge"
    BODY = "body"


def split_lines(text: str) -> list[str]:
    """Split on LF; a final LF terminates the last line rather than starting a new one."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def classify_line(index: int, line: str) -> LineKind:
    if index == 0 and line.startswith(AREA_PREFIX):
        return LineKind.AREA
    if line.startswith(SEEN_BY_PREFIX):
        return LineKind.SEEN_BY
    if line.startswith(KLUDGE_MARKER):
        return LineKind.KLUDGE
    return LineKind.BODY


def parse_kludge_line(index: int, line: str) -> tuple[str, str] | None:
    """Return ``(name, value)`` for a metadata line, or None if it carries none."""
    kind = classify_line(index, line)
    if kind in (LineKind.AREA, LineKind.SEEN_BY):
        name, value = line.split(":", 1)
        return name, value
    if kind is LineKind.KLUDGE:
        parts = line.replace("  ", " ").split(" ", 1)
        if len(parts) < 2 or not parts[0] or not parts[1]:
            return None
        name = parts[0].removeprefix(KLUDGE_MARKER).removesuffix(":")
        return name, parts[1]
    return None


def _iter_kludges(text: str):
    for index, line in enumerate(split_lines(text)):
        kludge = parse_kludge_line(index, line)
        if kludge is not None:
            yield kludge


def extract_kludges(text: str) -> dict[str, str]:
    """Map kludge names to values. A repeated name keeps its last value."""
    return dict(_iter_kludges(text))


def collect_kludges(text: str) -> dict[str, list[str]]:
    """Map kludge names to every value seen, in order (e.g. several SEEN-BY or PATH lines)."""
    kludges: dict[str, list[str]] = {}
    for name, value in _iter_kludges(text):
        kludges.setdefault(name, []).append(value)
    return kludges


def strip_kludges(text: str) -> str:
    """Return the body text with AREA, SEEN-BY and control lines removed."""
    return "".join(
        line + "\n"
        for index, line in enumerate(split_lines(text))
        if classify_line(index, line) is LineKind.BODY
    )
