from __future__ import annotations

import re
from typing import Dict, List

from srt_cleaner.cleaning import classify_line
from srt_cleaner.types import AnnotatedLine, LineKind

TIMESTAMP_PATTERN = re.compile(r"\d{2}:\d{2}:\d{2},\d{3}\s*-->\s*\d{2}:\d{2}:\d{2},\d{3}")

RESET = "\033[0m"
COLORS: Dict[LineKind, str] = {
    "blank": "",
    "index": "\033[90m",
    "timing": "\033[33m",
    "text": "\033[37m",
}


def annotate(text: str) -> List[AnnotatedLine]:
    """Tag every line of ``text`` with its kind, numbered from 1."""

    return [
        AnnotatedLine(number, classify_line(line), line)
        for number, line in enumerate(text.split("\n"), start=1)
    ]


def timing_spans(line: str) -> list[tuple[int, int]]:
    return [match.span() for match in TIMESTAMP_PATTERN.finditer(line)]


def _colorize(line: AnnotatedLine) -> str:
    if line.kind == "timing":
        spans = timing_spans(line.text)
        if not spans:
            return f"{COLORS['timing']}{line.text}{RESET}"
        pieces: list[str] = []
        position = 0
        for start, end in spans:
            pieces.append(line.text[position:start])
            pieces.append(f"{COLORS['timing']}{line.text[start:end]}{RESET}")
            position = end
        pieces.append(line.text[position:])
        return "".join(pieces)
    color = COLORS[line.kind]
    if not color:
        return line.text
    return f"{color}{line.text}{RESET}"


def render(text: str, *, color: bool = False) -> str:
    rows = []
    for line in annotate(text):
        shown = _colorize(line) if color else line.text
        rows.append(f"{line.number}\t{line.kind}\t{shown}")
    return "\n".join(rows)
