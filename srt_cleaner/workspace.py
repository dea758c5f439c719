from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List

from srt_cleaner.cleaning import CleaningOptions, clean_text, load_subtitle, write_text
from srt_cleaner.history import MAX_HISTORY, HistoryManager
from srt_cleaner.types import DocumentStatus

LOGGER = logging.getLogger(__name__)

DEFAULT_ROOT = Path("/workspace")
UNTITLED_NAME = "Untitled.srt"


class NoDocumentError(LookupError):
    """Raised when an operation needs a current document and none is open."""


@dataclass
class Document:
    name: str
    path: str
    content: str = ""
    modified: bool = False
    saved_content: str = field(default="", repr=False)

    @classmethod
    def create(cls, name: str, path: str, content: str = "") -> "Document":
        return cls(name=name, path=path, content=content, modified=False, saved_content=content)

    def edit(self, content: str) -> None:
        self.content = content
        self.modified = content != self.saved_content

    def mark_saved(self) -> None:
        self.saved_content = self.content
        self.modified = False


class Workspace:
    """Open documents, the current document, and its undo/redo history."""

    def __init__(
        self,
        *,
        max_history: int = MAX_HISTORY,
        clock: Callable[[], int] | None = None,
        root: Path = DEFAULT_ROOT,
    ) -> None:
        self.root = root
        self.documents: Dict[str, Document] = {}
        self.current: Document | None = None
        self.history = HistoryManager("", max_entries=max_history, clock=clock)

    @property
    def files(self) -> List[Document]:
        return list(self.documents.values())

    def _require_current(self) -> Document:
        if self.current is None:
            raise NoDocumentError("No document is open.")
        return self.current

    def _activate(self, document: Document) -> Document:
        self.current = document
        self.history.reset(document.content)
        LOGGER.debug("Activated %s", document.path)
        return document

    def _unique_path(self, name: str) -> str:
        candidate = self.root / name
        stem, suffix = candidate.stem, candidate.suffix
        counter = 1
        while str(candidate) in self.documents:
            candidate = self.root / f"{stem}-{counter}{suffix}"
            counter += 1
        return str(candidate)

    def add_document(self, name: str, content: str, path: str | None = None) -> Document:
        """Register in-memory text as an open document and make it current."""

        key = path or self._unique_path(name)
        if key in self.documents:
            return self._activate(self.documents[key])
        document = Document.create(name=name if path else Path(key).name, path=key, content=content)
        self.documents[key] = document
        return self._activate(document)

    def new_file(self, name: str = UNTITLED_NAME) -> Document:
        return self.add_document(name, "")

    def open_file(self, path: Path) -> Document:
        key = str(path)
        if key in self.documents:
            return self._activate(self.documents[key])
        content = load_subtitle(path)
        LOGGER.info("Opened %s", path)
        return self.add_document(path.name, content, path=key)

    def select(self, path: str) -> Document:
        try:
            document = self.documents[path]
        except KeyError:
            raise KeyError(f"Document is not open: {path}") from None
        return self._activate(document)

    def update_content(self, content: str) -> Document:
        document = self._require_current()
        if content == document.content:
            return document
        document.edit(content)
        self.history.record(content)
        return document

    def save(self) -> Document:
        document = self._require_current()
        document.mark_saved()
        LOGGER.info("Saved %s", document.path)
        return document

    def export(self, path: Path | None = None) -> Path:
        document = self._require_current()
        destination = path or Path(document.path)
        write_text(document.content, destination)
        return destination

    def _apply(self, content: str | None) -> str | None:
        if content is not None:
            self._require_current().edit(content)
        return content

    def undo(self) -> str | None:
        self._require_current()
        return self._apply(self.history.undo())

    def redo(self) -> str | None:
        self._require_current()
        return self._apply(self.history.redo())

    def clean_current(self, options: CleaningOptions | None = None) -> Document:
        document = self._require_current()
        return self.update_content(clean_text(document.content, options))

    def status(self) -> DocumentStatus:
        document = self._require_current()
        return {
            "name": document.name,
            "path": document.path,
            "line_count": len(document.content.split("\n")),
            "file_type": document.name.rsplit(".", 1)[-1].upper() or "TXT",
            "modified": document.modified,
        }
