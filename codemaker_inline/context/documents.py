# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Open-document enumeration for local context retrieval.

The retriever does not talk to the editor directly. Hosts expose their
open documents through a ``DocumentDirectory``; two implementations are
provided, one for in-memory buffers and one backed by the file system.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Protocol, Sequence, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class DocumentDirectory(Protocol):
    """Ordered view of the documents open in the editor."""

    def list(self) -> Sequence[str]:
        """Identifiers of all open documents, in tab order."""
        ...

    def active_index(self) -> int:
        """Index of the active document in ``list()`` (-1 if none)."""
        ...

    async def read(self, document_id: str) -> str:
        """Read a document's current content."""
        ...


class InMemoryDocumentDirectory:
    """Directory over documents held in memory (e.g. unsaved editor buffers)."""

    def __init__(self, documents: Optional[dict[str, str]] = None, active: Optional[str] = None):
        """Initialize the directory.

        Args:
            documents: Document identifier -> content, in tab order
            active: Identifier of the active document
        """
        self._documents: dict[str, str] = dict(documents or {})
        self._active = active

    def open(self, document_id: str, content: str) -> None:
        """Open a document at the end of the tab order.

        Re-opening a document updates its content and moves it to the end.
        """
        self._documents.pop(document_id, None)
        self._documents[document_id] = content

    def close(self, document_id: str) -> bool:
        """Close a document. Returns True if it was open."""
        if self._active == document_id:
            self._active = None
        return self._documents.pop(document_id, None) is not None

    def activate(self, document_id: str) -> None:
        """Make an open document the active one."""
        if document_id not in self._documents:
            raise KeyError(document_id)
        self._active = document_id

    def list(self) -> Sequence[str]:
        return list(self._documents)

    def active_index(self) -> int:
        if self._active is None:
            return -1
        try:
            return self.list().index(self._active)
        except ValueError:
            return -1

    async def read(self, document_id: str) -> str:
        return self._documents[document_id]


class FileSystemDocumentDirectory:
    """Directory over files on disk, identified by path."""

    def __init__(
        self,
        paths: Sequence[Path],
        active: Optional[Path] = None,
        encoding: str = "utf-8",
    ):
        self._paths = [Path(p) for p in paths]
        self._active = Path(active) if active is not None else None
        self._encoding = encoding

    def list(self) -> Sequence[str]:
        return [str(path) for path in self._paths]

    def active_index(self) -> int:
        if self._active is None or self._active not in self._paths:
            return -1
        return self._paths.index(self._active)

    async def read(self, document_id: str) -> str:
        logger.debug(f"Reading document: {document_id}")
        return await asyncio.to_thread(Path(document_id).read_text, encoding=self._encoding)
