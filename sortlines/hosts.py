"""
hosts.py — Where the text comes from and where the sorted text goes.

A host wraps one text source and answers three questions:

    context()        -> EditingContext, or None when there is nothing to sort
    document         -> the Document read from the source
    write(document)  -> put the new text back

FileHost      a file on disk; the selection comes from --lines
StreamHost    text piped on stdin, result on stdout; the whole text is selected
ClipboardHost the system clipboard via pyperclip; the whole text is selected
"""
import os
import sys
import tempfile
from pathlib import Path
from typing import Optional

import pyperclip

from .document import Document
from .ranges import EditingContext, Selection


def _whole_text(document: Document) -> Selection:
    return Selection(0, document.line_count - 1)


class FileHost:
    name = "file"

    def __init__(self, path: str, selection: Optional[Selection] = None):
        self.path      = Path(path)
        self.selection = selection or Selection.empty()
        self._document = None

    @property
    def document(self) -> Document:
        if self._document is None:
            # newline="" keeps \r\n so Document can detect it
            with open(self.path, "r", encoding="utf-8", newline="") as fh:
                self._document = Document.from_text(fh.read())
        return self._document

    def context(self) -> Optional[EditingContext]:
        if not self.path.is_file():
            return None
        return EditingContext(self.document.line_count, self.selection)

    def write(self, document: Document) -> bool:
        """Replace the file in one step: write a sibling temp file, then rename."""
        fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(document.render())
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise
        self._document = document
        return True

    def __str__(self):
        return str(self.path)


class StreamHost:
    name = "stdin"

    def __init__(self, stdin=None, stdout=None):
        self._stdin    = stdin or sys.stdin
        self._stdout   = stdout or sys.stdout
        self._document = None

    @property
    def document(self) -> Document:
        if self._document is None:
            self._document = Document.from_text(self._stdin.read())
        return self._document

    def context(self) -> Optional[EditingContext]:
        doc = self.document
        if doc.lines == [""]:
            return None
        return EditingContext(doc.line_count, _whole_text(doc))

    def write(self, document: Document) -> bool:
        self._stdout.write(document.render())
        self._stdout.flush()
        return True

    def __str__(self):
        return "<stdin>"


class ClipboardHost:
    name = "clipboard"

    def __init__(self):
        self._document = None

    def refresh(self):
        """Forget the cached clipboard text so the next read sees new content."""
        self._document = None

    @property
    def document(self) -> Document:
        if self._document is None:
            self._document = Document.from_text(pyperclip.paste() or "")
        return self._document

    def context(self) -> Optional[EditingContext]:
        doc = self.document
        if doc.lines == [""]:
            return None
        return EditingContext(doc.line_count, _whole_text(doc))

    def write(self, document: Document) -> bool:
        pyperclip.copy(document.render())
        self._document = document
        return True

    def __str__(self):
        return "<clipboard>"
