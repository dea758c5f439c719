from __future__ import annotations

from typing import Literal, NamedTuple, TypedDict

LineKind = Literal["blank", "index", "timing", "text"]
OutputFormat = Literal["plain-text", "markdown", "html"]

OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("plain-text", "markdown", "html")


class AnnotatedLine(NamedTuple):
    number: int
    kind: LineKind
    text: str


class DocumentStatus(TypedDict):
    """Summary of the current document shown alongside the editor."""

    name: str
    path: str
    line_count: int
    file_type: str
    modified: bool
