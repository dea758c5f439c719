"""Compatibility wrapper for cleaning subtitle files.

Use the packaged CLI instead:
    python -m srt_cleaner.cli clean
or install the package and run `srt-cleaner clean`.
"""

from srt_cleaner.cli import clean_cli


if __name__ == "__main__":
    clean_cli()
