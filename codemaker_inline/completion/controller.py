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

"""Inline completion trigger controller.

Decides when a keystroke turns into a backend request:

1. Eligibility: autocomplete is enabled and the cursor sits at the end
   of the line's code.
2. Debounce: wait for a quiet period, giving up if the host cancels.
3. Reuse: if the user is typing into the last completion, show it again
   with an updated range instead of calling the backend.
4. Fetch: gather local snippet contexts and call the backend.
5. Align: re-indent the result to the caller's style and cache it.
"""

import logging
import time
from typing import Optional

from codemaker_inline.completion.backend import CompletionBackend
from codemaker_inline.completion.cancellation import CancellationToken, delay_or_cancel
from codemaker_inline.completion.eligibility import should_skip
from codemaker_inline.completion.imports import resolve_imports_command
from codemaker_inline.completion.protocol import (
    CompletionMetrics,
    CompletionSession,
    InlineCompletionItem,
    InlineCompletionParams,
    Position,
    Range,
)
from codemaker_inline.config import CompletionSettings
from codemaker_inline.context.retriever import CodeSnippetContext, LocalContextRetriever
from codemaker_inline.indentation.indenter import Indenter

logger = logging.getLogger(__name__)


class InlineCompletionController:
    """Produces inline completions for one editor.

    The controller keeps the last fetched completion as its session and
    is not shared between editors. Backend errors are not handled here.
    """

    def __init__(
        self,
        backend: CompletionBackend,
        retriever: Optional[LocalContextRetriever] = None,
    ):
        """Initialize the controller.

        Args:
            backend: Completion backend
            retriever: Local context retriever (no snippets if not provided)
        """
        self._backend = backend
        self._retriever = retriever
        self._session: Optional[CompletionSession] = None
        self._metrics = CompletionMetrics()

    @property
    def session(self) -> Optional[CompletionSession]:
        """The last completion fetched from the backend."""
        return self._session

    @property
    def metrics(self) -> CompletionMetrics:
        return self._metrics

    def reset(self) -> None:
        """Forget the cached completion."""
        self._session = None

    async def provide_inline_completion(
        self,
        params: InlineCompletionParams,
        settings: Optional[CompletionSettings] = None,
        token: Optional[CancellationToken] = None,
    ) -> Optional[InlineCompletionItem]:
        """Get the inline completion for a cursor position.

        Args:
            params: Document, cursor and line text
            settings: Settings snapshot (defaults if not provided)
            token: Cancellation token observed during the debounce delay

        Returns:
            A completion item, or None when there is nothing to show
        """
        settings = settings or CompletionSettings()
        self._metrics.total_requests += 1

        if should_skip(params, settings):
            logger.debug("Skipped completion")
            self._metrics.skipped_requests += 1
            return None

        if await delay_or_cancel(token, settings.completion_delay):
            logger.debug("Cancelled completion")
            self._metrics.cancelled_requests += 1
            return None

        line = params.position.line
        if self._session is not None and self._session.is_continued_by(
            params.line_prefix, line, params.line_count
        ):
            logger.debug("Do not need new completion")
            self._metrics.cache_hits += 1
        else:
            self._metrics.cache_misses += 1
            session = await self._fetch(params, settings)
            if session is None:
                return None
            self._session = session

        self._metrics.successful_requests += 1
        return self._build_item(params, self._session.pending_text)

    async def _fetch(
        self, params: InlineCompletionParams, settings: CompletionSettings
    ) -> Optional[CompletionSession]:
        snippet_contexts = await self._snippet_contexts(params, settings)
        self._metrics.total_snippet_contexts += len(snippet_contexts)

        self._metrics.backend_requests += 1
        start_time = time.time()
        try:
            output = await self._backend.complete(
                params.file_content,
                params.language,
                params.offset,
                settings.allow_multi_line,
                snippet_contexts,
            )
        except Exception:
            self._metrics.failed_requests += 1
            raise
        finally:
            self._metrics.total_latency_ms += (time.time() - start_time) * 1000

        logger.debug(f"Completion output: {output!r}")
        if not output:
            return None

        indenter = Indenter.from_input(
            settings.indentation_char, settings.indentation_width, params.line_prefix
        )
        pending_text = params.line_prefix.lstrip() + indenter.align_indentation(output)
        return CompletionSession(pending_text=pending_text, anchor_line=params.position.line)

    async def _snippet_contexts(
        self, params: InlineCompletionParams, settings: CompletionSettings
    ) -> list[CodeSnippetContext]:
        if not settings.allow_local_context or self._retriever is None:
            return []
        return await self._retriever.get_code_snippet_contexts(params.file_content, params.offset)

    def _build_item(self, params: InlineCompletionParams, insert_text: str) -> InlineCompletionItem:
        line = params.position.line
        start_character = len(params.line_prefix) - len(params.line_prefix.lstrip())
        return InlineCompletionItem(
            insert_text=insert_text,
            range=Range(
                start=Position(line=line, character=start_character),
                end=Position(line=line, character=len(params.line_text)),
            ),
            command=resolve_imports_command(insert_text),
        )
