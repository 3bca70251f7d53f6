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

"""Inline completion pipeline for editor integrations.

Example usage:
    from codemaker_inline.completion import (
        CancellationToken,
        InlineCompletionController,
        InlineCompletionParams,
    )

    controller = InlineCompletionController(backend, retriever)

    params = InlineCompletionParams.from_document(text, line=10, character=12, language="JAVA")
    token = CancellationToken()
    item = await controller.provide_inline_completion(params, settings, token)
"""

from codemaker_inline.completion.backend import (
    ClientCompletionBackend,
    CompletionBackend,
    CompletionRequest,
    CompletionResponse,
    build_completion_request,
)
from codemaker_inline.completion.cancellation import CancellationToken, delay_or_cancel
from codemaker_inline.completion.controller import InlineCompletionController
from codemaker_inline.completion.eligibility import is_end_of_line, should_skip
from codemaker_inline.completion.imports import (
    RESOLVE_IMPORTS_COMMAND,
    CodeAction,
    CodeActionSource,
    ImportResolver,
)
from codemaker_inline.completion.protocol import (
    CompletionMetrics,
    CompletionSession,
    InlineCompletionItem,
    InlineCompletionParams,
    Position,
    Range,
)

__all__ = [
    # Protocol types
    "CompletionMetrics",
    "CompletionSession",
    "InlineCompletionItem",
    "InlineCompletionParams",
    "Position",
    "Range",
    # Backend
    "ClientCompletionBackend",
    "CompletionBackend",
    "CompletionRequest",
    "CompletionResponse",
    "build_completion_request",
    # Controller
    "CancellationToken",
    "InlineCompletionController",
    "delay_or_cancel",
    "is_end_of_line",
    "should_skip",
    # Imports
    "RESOLVE_IMPORTS_COMMAND",
    "CodeAction",
    "CodeActionSource",
    "ImportResolver",
]
