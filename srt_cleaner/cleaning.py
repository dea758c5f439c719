from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from srt_cleaner.types import LineKind, OutputFormat

LOGGER = logging.getLogger(__name__)

TIMING_MARKER = "-->"
INDEX_PATTERN = re.compile(r"[0-9]+")
SUPPORTED_SUFFIXES = (".srt", ".txt")
CLEAN_SUFFIX = ".clean.txt"

# Whitespace and line terminators stripped from both ends of a line, byte order mark included.
TRIM_CHARACTERS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class CleaningOptions:
    """Configuration for subtitle cleaning."""

    remove_timestamps: bool = True
    remove_line_numbers: bool = True
    preserve_empty_lines: bool = False
    trim_lines: bool = True
    output_format: OutputFormat = "plain-text"  # accepted, does not change output


def env_flag(var_name: str, default: bool) -> bool:
    value = os.getenv(var_name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def trim(line: str) -> str:
    return line.strip(TRIM_CHARACTERS)


def iter_subtitle_files(directory: Path) -> Iterator[Path]:
    """Yield subtitle files in ``directory`` sorted by name, skipping cleaned output."""

    for filename in sorted(directory.iterdir()):
        if not filename.is_file() or filename.suffix.lower() not in SUPPORTED_SUFFIXES:
            continue
        if filename.name.endswith(CLEAN_SUFFIX):
            continue
        yield filename


def classify_line(line: str) -> LineKind:
    """Classify a single subtitle line.

    Index detection runs before timing detection, so a digits-only line is
    always an index line.
    """

    stripped = trim(line)
    if not stripped:
        return "blank"
    if INDEX_PATTERN.fullmatch(stripped):
        return "index"
    if TIMING_MARKER in line:
        return "timing"
    return "text"


def clean_text(text: str, options: CleaningOptions | None = None) -> str:
    """Drop index/timing/blank lines from subtitle text according to ``options``."""

    cleaning_options = options or CleaningOptions()
    result: List[str] = []

    for line in text.split("\n"):
        kind = classify_line(line)
        if kind == "blank":
            if cleaning_options.preserve_empty_lines:
                result.append("")
            continue
        if kind == "index" and cleaning_options.remove_line_numbers:
            continue
        if kind == "timing" and cleaning_options.remove_timestamps:
            continue

        if cleaning_options.trim_lines:
            line = trim(line)
        if line:
            result.append(line)

    return "\n".join(result)


def load_subtitle(path: Path) -> str:
    """Read a .srt or .txt file as text."""

    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported subtitle file '{path.name}'. Expected one of: {', '.join(SUPPORTED_SUFFIXES)}."
        )
    if not path.is_file():
        raise FileNotFoundError(f"Subtitle file does not exist: {path}")

    LOGGER.info("Loading subtitles from %s", path)
    with path.open("r", encoding="utf-8-sig", errors="ignore") as infile:
        return infile.read()


def load_directory(directory: Path) -> list[tuple[str, str]]:
    """Load every subtitle file in a directory, sorted by name."""

    if not directory.is_dir():
        raise NotADirectoryError(f"Subtitle directory is not a directory: {directory}")

    corpus: list[tuple[str, str]] = []
    for filename in iter_subtitle_files(directory):
        corpus.append((filename.name, load_subtitle(filename)))
    LOGGER.debug("Loaded %d subtitle files", len(corpus))
    return corpus


def default_output_path(input_path: Path, output_dir: Path | None = None) -> Path:
    directory = output_dir if output_dir is not None else input_path.parent
    return directory / f"{input_path.stem}{CLEAN_SUFFIX}"


def write_text(text: str, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Writing cleaned subtitles to %s", output_path)
    with output_path.open("w", encoding="utf-8", newline="\n") as outfile:
        outfile.write(text)


def clean_file(
    input_path: Path,
    output_path: Path | None = None,
    *,
    options: CleaningOptions | None = None,
) -> Path:
    text = load_subtitle(input_path)
    cleaned = clean_text(text, options)
    LOGGER.debug(
        "Cleaned %s: %d lines in, %d lines out",
        input_path.name,
        len(text.split("\n")),
        len(cleaned.split("\n")) if cleaned else 0,
    )
    destination = output_path or default_output_path(input_path)
    write_text(cleaned, destination)
    return destination


def clean_directory(
    directory: Path,
    output_dir: Path,
    *,
    options: CleaningOptions | None = None,
) -> List[Path]:
    """Clean all subtitle files in ``directory`` into ``output_dir``."""

    written: List[Path] = []
    for filename, text in load_directory(directory):
        destination = default_output_path(directory / filename, output_dir)
        write_text(clean_text(text, options), destination)
        written.append(destination)

    LOGGER.info("Cleaned %d subtitle files", len(written))
    return written
