"""Utilities for cleaning SRT subtitles and tracking edit history."""

from .cleaning import CleaningOptions, classify_line, clean_file, clean_text
from .history import MAX_HISTORY, HistoryManager, HistoryState
from .workspace import Document, NoDocumentError, Workspace

__all__ = [
    "CleaningOptions",
    "classify_line",
    "clean_text",
    "clean_file",
    "HistoryManager",
    "HistoryState",
    "MAX_HISTORY",
    "Document",
    "NoDocumentError",
    "Workspace",
]
