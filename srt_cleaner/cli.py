from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .cleaning import (
    CleaningOptions,
    clean_file,
    clean_text,
    default_output_path,
    env_flag,
    iter_subtitle_files,
    load_subtitle,
)
from .highlight import render
from .types import OUTPUT_FORMATS

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(description="SRT subtitle cleaning utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    clean_parser = subparsers.add_parser(
        "clean", parents=[common], help="Strip index and timing lines from subtitle files"
    )
    clean_parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Subtitle files (.srt/.txt) or directories containing them",
    )
    destination = clean_parser.add_mutually_exclusive_group()
    destination.add_argument(
        "--output",
        "-o",
        help="Output file for a single input, or '-' for stdout",
    )
    destination.add_argument(
        "--output-dir",
        type=Path,
        default=Path(os.environ["SRT_OUTPUT_DIR"]) if os.getenv("SRT_OUTPUT_DIR") else None,
        help="Directory for cleaned files (default: next to each input, or SRT_OUTPUT_DIR)",
    )
    clean_parser.add_argument(
        "--keep-timestamps",
        action="store_false",
        dest="remove_timestamps",
        default=env_flag("SRT_REMOVE_TIMESTAMPS", True),
        help="Keep lines containing '-->' (or set SRT_REMOVE_TIMESTAMPS=0)",
    )
    clean_parser.add_argument(
        "--keep-line-numbers",
        action="store_false",
        dest="remove_line_numbers",
        default=env_flag("SRT_REMOVE_LINE_NUMBERS", True),
        help="Keep digit-only index lines (or set SRT_REMOVE_LINE_NUMBERS=0)",
    )
    clean_parser.add_argument(
        "--preserve-empty-lines",
        action="store_true",
        default=env_flag("SRT_PRESERVE_EMPTY_LINES", False),
        help="Keep blank lines as empty output lines (or set SRT_PRESERVE_EMPTY_LINES=1)",
    )
    clean_parser.add_argument(
        "--no-trim",
        action="store_false",
        dest="trim_lines",
        default=env_flag("SRT_TRIM_LINES", True),
        help="Keep leading/trailing whitespace on text lines (or set SRT_TRIM_LINES=0)",
    )
    clean_parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=os.getenv("SRT_OUTPUT_FORMAT", "plain-text"),
        help="Output format (default: %(default)s or SRT_OUTPUT_FORMAT)",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", parents=[common], help="Print each line with its classification"
    )
    inspect_parser.add_argument("input", type=Path, help="Subtitle file to inspect")
    inspect_parser.add_argument("--color", action="store_true", help="Highlight lines with ANSI colors")

    return parser


def expand_inputs(inputs: List[Path]) -> List[Path]:
    expanded: List[Path] = []
    for path in inputs:
        if path.is_dir():
            expanded.extend(iter_subtitle_files(path))
        else:
            expanded.append(path)
    return expanded


def run_clean(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.output_format not in OUTPUT_FORMATS:
        parser.error(
            f"Invalid output format '{args.output_format}'. Expected one of: {', '.join(OUTPUT_FORMATS)}."
        )
    options = CleaningOptions(
        remove_timestamps=args.remove_timestamps,
        remove_line_numbers=args.remove_line_numbers,
        preserve_empty_lines=args.preserve_empty_lines,
        trim_lines=args.trim_lines,
        output_format=args.output_format,
    )
    inputs = expand_inputs(args.inputs)
    if not inputs:
        parser.error("No subtitle files found in the given inputs")
    if args.output is not None and len(inputs) != 1:
        parser.error("--output can only be used with a single input file")

    try:
        if args.output == "-":
            sys.stdout.write(clean_text(load_subtitle(inputs[0]), options) + "\n")
            return
        if args.output is not None:
            clean_file(inputs[0], Path(args.output), options=options)
            return
        for input_path in inputs:
            clean_file(input_path, default_output_path(input_path, args.output_dir), options=options)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))
    LOGGER.info("Cleaned %d subtitle files", len(inputs))


def run_inspect(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    try:
        text = load_subtitle(args.input)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))
    sys.stdout.write(render(text, color=args.color) + "\n")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    if args.command == "clean":
        run_clean(args, parser)
    elif args.command == "inspect":
        run_inspect(args, parser)
    else:
        parser.error("No command provided")


def clean_cli() -> None:
    argv = sys.argv[1:]
    main(["clean", *argv])


if __name__ == "__main__":
    main()
