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

"""Local context retrieval from neighbouring open documents.

For each request the retriever takes the last lines of code before the
cursor, scores windows of the documents open next to the active one by
Jaccard distance, and returns the closest matches as snippet contexts.
Retrieval is best-effort: a document that cannot be read is dropped.
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

from codemaker_inline.context.documents import DocumentDirectory
from codemaker_inline.context.jaccard import find_best_window, split_lines

logger = logging.getLogger(__name__)

MAX_SIDE_TABS = 20
LAST_N_LINES = 30
JACCARD_WINDOW_SIZE = 30
MAX_LINE_COUNT = 1000
MAX_SCORE = 0.95
MAX_SNIPPET_COUNT = 5

T = TypeVar("T")


@dataclass(frozen=True)
class CodeSnippetContext:
    """A ranked excerpt of another open document."""

    language: str
    snippet: str
    relative_path: str
    score: float


def select_nearby_documents(documents: Sequence[T], active_index: int) -> list[T]:
    """Pick the documents open closest to the active one.

    Up to ``MAX_SIDE_TABS`` documents are taken from each side of the
    active document, nearest first, left side before right side. When one
    side is short, the other side fills the gap up to twice that limit.

    Args:
        documents: All open documents in tab order
        active_index: Index of the active document

    Returns:
        Selected documents, never including the active one
    """
    if active_index < 0 or active_index >= len(documents):
        return []

    if len(documents) <= 2 * MAX_SIDE_TABS + 1:
        return [doc for index, doc in enumerate(documents) if index != active_index]

    left = list(reversed(documents[:active_index]))
    right = list(documents[active_index + 1 :])

    left_count = min(MAX_SIDE_TABS, len(left))
    right_count = min(MAX_SIDE_TABS, len(right))
    if left_count < MAX_SIDE_TABS and left_count + right_count < 2 * MAX_SIDE_TABS:
        right_count = min(len(right), 2 * MAX_SIDE_TABS - left_count)
    if right_count < MAX_SIDE_TABS and left_count + right_count < 2 * MAX_SIDE_TABS:
        left_count = min(len(left), 2 * MAX_SIDE_TABS - right_count)

    return left[:left_count] + right[:right_count]


def anchor_text(file_content: str, offset: int) -> str:
    """Last ``LAST_N_LINES`` lines of the text before ``offset``."""
    lines = split_lines(file_content[:offset])
    return "\n".join(lines[-LAST_N_LINES:])


def truncate_lines(content: str, max_lines: int = MAX_LINE_COUNT) -> str:
    """Keep at most the first ``max_lines`` lines of a document."""
    lines = split_lines(content)
    if len(lines) <= max_lines:
        return content
    return "\n".join(lines[:max_lines])


class LocalContextRetriever:
    """Ranks snippets of neighbouring open documents by similarity.

    Example:
        retriever = LocalContextRetriever(directory, workspace_root="/repo")
        contexts = await retriever.get_code_snippet_contexts(text, offset)
    """

    def __init__(
        self,
        directory: DocumentDirectory,
        workspace_root: Optional[str] = None,
        max_snippets: int = MAX_SNIPPET_COUNT,
        max_score: float = MAX_SCORE,
    ):
        """Initialize the retriever.

        Args:
            directory: Source of open documents
            workspace_root: Root that snippet paths are made relative to
            max_snippets: Maximum number of snippets returned
            max_score: Candidates scoring above this distance are dropped
        """
        self._directory = directory
        self._workspace_root = workspace_root
        self._max_snippets = max_snippets
        self._max_score = max_score

    async def get_code_snippet_contexts(
        self, file_content: str, offset: int
    ) -> list[CodeSnippetContext]:
        """Collect snippet contexts for a cursor in the active document.

        Args:
            file_content: Full text of the active document
            offset: Cursor offset in ``file_content``

        Returns:
            At most ``max_snippets`` contexts sorted by ascending score
        """
        documents = list(self._directory.list())
        active_index = self._directory.active_index()
        if active_index < 0 or active_index >= len(documents):
            logger.debug("No active document, skipping local context")
            return []

        active_id = documents[active_index]
        candidates = select_nearby_documents(documents, active_index)
        if not candidates:
            return []

        target = anchor_text(file_content, offset)
        contents = await asyncio.gather(*(self._read(doc_id) for doc_id in candidates))

        contexts: list[CodeSnippetContext] = []
        for doc_id, content in zip(candidates, contents):
            if content is None or doc_id == active_id:
                continue
            match = find_best_window(target, content, JACCARD_WINDOW_SIZE)
            if match.score > self._max_score:
                continue
            relative_path = self._relative_path(doc_id)
            contexts.append(
                CodeSnippetContext(
                    language=os.path.splitext(relative_path)[1][1:],
                    snippet=match.matched_text,
                    relative_path=relative_path,
                    score=match.score,
                )
            )

        contexts.sort(key=lambda context: context.score)
        logger.debug(f"Selected {min(len(contexts), self._max_snippets)} snippet contexts")
        return contexts[: self._max_snippets]

    async def _read(self, document_id: str) -> Optional[str]:
        try:
            content = await self._directory.read(document_id)
        except Exception as e:
            logger.debug(f"Skipping unreadable document {document_id}: {e}")
            return None
        return truncate_lines(content)

    def _relative_path(self, document_id: str) -> str:
        if self._workspace_root and os.path.isabs(document_id):
            try:
                return os.path.normpath(os.path.relpath(document_id, self._workspace_root))
            except ValueError:
                pass
        return os.path.normpath(document_id)
