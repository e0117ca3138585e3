"""
Corpus loader: loads HTML documents to corrupt.

Supports:
  - Built-in sample documents (for dry runs / unit tests)
  - JSON file with the same schema as SAMPLE_DOCUMENTS
  - Plain directory of .html / .htm files (no candidate or assignment names)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import List, Optional, Dict, Any

from corruption.markup import strip_tags

from .sample_documents import SAMPLE_DOCUMENTS

_HTML_EXTENSIONS = (".html", ".htm")


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------

@dataclass
class DocumentEntry:
    id: str
    html: str
    candidate_name: str = ""
    assignment_name: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DocumentEntry":
        return cls(
            id=d["id"],
            html=d["html"],
            candidate_name=d.get("candidate_name", ""),
            assignment_name=d.get("assignment_name", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "html": self.html,
            "candidate_name": self.candidate_name,
            "assignment_name": self.assignment_name,
        }

    @property
    def word_count(self) -> int:
        return len(strip_tags(self.html).split())

    @property
    def has_content(self) -> bool:
        return bool(strip_tags(self.html).strip())


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

class CorpusLoader:
    """
    Load a corpus of DocumentEntry objects from various sources.

    Usage
    -----
    # Built-in sample documents
    loader = CorpusLoader()
    docs = loader.load()

    # From a JSON file
    loader = CorpusLoader(json_path="my_corpus.json")
    docs = loader.load()

    # From a directory of .html files
    loader = CorpusLoader(html_dir="essays/")
    docs = loader.load()

    Documents with no text content are skipped.
    """

    def __init__(
        self,
        json_path: Optional[str] = None,
        html_dir: Optional[str] = None,
        max_docs: Optional[int] = None,
    ) -> None:
        self.json_path = json_path
        self.html_dir = html_dir
        self.max_docs = max_docs

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self) -> List[DocumentEntry]:
        """Return a list of DocumentEntry objects according to the configured source."""
        if self.json_path:
            entries = self._load_from_json(self.json_path)
        elif self.html_dir:
            entries = self._load_from_html_dir(self.html_dir)
        else:
            entries = self._load_sample_documents()

        entries = [e for e in entries if e.has_content]

        if self.max_docs is not None:
            entries = entries[: self.max_docs]

        return entries

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _load_sample_documents(self) -> List[DocumentEntry]:
        return [DocumentEntry.from_dict(d) for d in SAMPLE_DOCUMENTS]

    def _load_from_json(self, path: str) -> List[DocumentEntry]:
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Corpus JSON not found: {path}")
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError("Corpus JSON must be a list of document entry objects.")
        return [DocumentEntry.from_dict(d) for d in data]

    def _load_from_html_dir(self, directory: str) -> List[DocumentEntry]:
        if not os.path.isdir(directory):
            raise NotADirectoryError(f"Corpus directory not found: {directory}")
        entries: List[DocumentEntry] = []
        for fname in sorted(os.listdir(directory)):
            if not fname.lower().endswith(_HTML_EXTENSIONS):
                continue
            entries.append(load_document(os.path.join(directory, fname)))
        return entries


def load_document(path: str) -> DocumentEntry:
    """Read a single HTML file; its id is the file name without extension."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"HTML document not found: {path}")
    with open(path, "r", encoding="utf-8") as fh:
        html = fh.read()
    doc_id = os.path.splitext(os.path.basename(path))[0]
    return DocumentEntry(id=doc_id, html=html)
