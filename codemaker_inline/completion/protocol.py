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

"""Inline completion protocol types.

Positions and ranges follow the LSP convention: zero-based line and
character indices.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from codemaker_inline.context.jaccard import LINE_BREAK_REGEX, split_lines
from codemaker_inline.languages import lang_from_file_extension


@dataclass(frozen=True)
class Position:
    """Zero-based position in a document."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """Range between two positions (end exclusive)."""

    start: Position
    end: Position


@dataclass
class InlineCompletionParams:
    """Parameters for an inline completion request."""

    file_content: str  # Full document text
    language: str  # Language tag, already validated
    position: Position
    offset: int  # Zero-based character offset of the cursor
    line_prefix: str = ""  # Current line text before the cursor
    line_suffix: str = ""  # Current line text after the cursor
    file_path: Optional[Path] = None

    @property
    def line_count(self) -> int:
        return len(split_lines(self.file_content))

    @property
    def line_text(self) -> str:
        """Full text of the current line."""
        return self.line_prefix + self.line_suffix

    @classmethod
    def from_document(
        cls,
        file_content: str,
        line: int,
        character: int,
        language: Optional[str] = None,
        file_path: Optional[Path] = None,
    ) -> "InlineCompletionParams":
        """Build parameters for a cursor in a document.

        Args:
            file_content: Full document text
            line: Cursor line (0-indexed)
            character: Cursor character (0-indexed, clamped to the line)
            language: Language tag (detected from ``file_path`` if omitted)
            file_path: Path of the document

        Returns:
            Parameters with offset, line prefix and line suffix filled in

        Raises:
            ValueError: If the line is outside the document
            UnsupportedLanguageError: If the language cannot be detected
        """
        lines = split_lines(file_content)
        if not 0 <= line < len(lines):
            raise ValueError(f"Line {line} is outside the document ({len(lines)} lines)")

        if language is None:
            if file_path is None:
                raise ValueError("Either language or file_path is required")
            language = lang_from_file_extension(file_path).value

        line_starts = [0] + [match.end() for match in LINE_BREAK_REGEX.finditer(file_content)]
        text = lines[line]
        character = max(0, min(character, len(text)))

        return cls(
            file_content=file_content,
            language=language,
            position=Position(line=line, character=character),
            offset=line_starts[line] + character,
            line_prefix=text[:character],
            line_suffix=text[character:],
            file_path=file_path,
        )


@dataclass
class InlineCompletionItem:
    """An inline (ghost text) completion."""

    insert_text: str
    range: Range
    command: Optional[dict[str, Any]] = None  # Follow-up run after acceptance


@dataclass(frozen=True)
class CompletionSession:
    """The last completion fetched by a controller."""

    pending_text: str
    anchor_line: int

    def is_continued_by(self, line_prefix: str, line: int, line_count: int) -> bool:
        """Check whether typing on ``line`` still follows this completion.

        Args:
            line_prefix: Current line text before the cursor
            line: Current cursor line
            line_count: Number of lines in the document

        Returns:
            True if the cached text can be shown again
        """
        if not 0 <= self.anchor_line < line_count:
            return False
        if line != self.anchor_line:
            return False
        return self.pending_text.strip().startswith(line_prefix.strip())


@dataclass
class CompletionMetrics:
    """Metrics for inline completion requests."""

    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    skipped_requests: int = 0
    cancelled_requests: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    backend_requests: int = 0
    total_latency_ms: float = 0.0  # Backend calls only
    total_snippet_contexts: int = 0

    @property
    def average_latency_ms(self) -> float:
        """Average latency of backend calls, failed or empty ones included."""
        if self.backend_requests == 0:
            return 0.0
        return self.total_latency_ms / self.backend_requests

    @property
    def success_rate(self) -> float:
        """Share of requests that produced a completion."""
        if self.total_requests == 0:
            return 0.0
        return self.successful_requests / self.total_requests
