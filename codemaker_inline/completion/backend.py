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

"""Completion backend contract.

The backend turns a document and cursor offset into a continuation of
the code at the cursor. Transport, authentication and timeouts belong
to the backend; its errors (``AuthenticationError``,
``UnsupportedLanguageError``, transport failures) propagate unchanged.
"""

import logging
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from codemaker_inline.context.retriever import CodeSnippetContext

logger = logging.getLogger(__name__)


@runtime_checkable
class CompletionBackend(Protocol):
    """Remote service producing completions."""

    async def complete(
        self,
        file_content: str,
        language: str,
        offset: int,
        allow_multi_line: bool,
        snippet_contexts: Sequence[CodeSnippetContext],
    ) -> str:
        """Return the continuation at ``offset`` ("" for no completion)."""
        ...


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SnippetContextPayload(_CamelModel):
    """Wire form of a snippet context."""

    language: str
    snippet: str
    relative_path: str = Field(alias="relativePath")
    score: float


class SourceInput(_CamelModel):
    source: str


class CompletionOptions(_CamelModel):
    code_path: str = Field(alias="codePath", description="Cursor location, '@<offset>'")
    allow_multi_line_autocomplete: bool = Field(alias="allowMultiLineAutocomplete")
    code_snippet_contexts: list[SnippetContextPayload] = Field(
        default_factory=list, alias="codeSnippetContexts"
    )
    context_id: Optional[str] = Field(default=None, alias="contextId")


class CompletionRequest(_CamelModel):
    """Completion request sent to the service."""

    language: str
    input: SourceInput
    options: CompletionOptions

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the service's camelCase field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CompletionOutput(_CamelModel):
    source: str = ""


class CompletionResponse(_CamelModel):
    """Completion response returned by the service."""

    output: CompletionOutput = Field(default_factory=CompletionOutput)


def build_completion_request(
    file_content: str,
    language: str,
    offset: int,
    allow_multi_line: bool,
    snippet_contexts: Sequence[CodeSnippetContext],
    context_id: Optional[str] = None,
) -> CompletionRequest:
    """Compose a completion request for a cursor offset."""
    return CompletionRequest(
        language=language,
        input=SourceInput(source=file_content),
        options=CompletionOptions(
            code_path=f"@{offset}",
            allow_multi_line_autocomplete=allow_multi_line,
            code_snippet_contexts=[
                SnippetContextPayload(
                    language=context.language,
                    snippet=context.snippet,
                    relative_path=context.relative_path,
                    score=context.score,
                )
                for context in snippet_contexts
            ],
            context_id=context_id,
        ),
    )


class CompletionClient(Protocol):
    """Transport client for the completion service."""

    async def completion(self, request: CompletionRequest) -> CompletionResponse: ...


class ClientCompletionBackend:
    """``CompletionBackend`` on top of a service client."""

    def __init__(self, client: CompletionClient, context_id: Optional[str] = None):
        """Initialize the backend.

        Args:
            client: Client sending requests to the service
            context_id: Registered source context to attach to requests
        """
        self._client = client
        self._context_id = context_id

    async def complete(
        self,
        file_content: str,
        language: str,
        offset: int,
        allow_multi_line: bool,
        snippet_contexts: Sequence[CodeSnippetContext],
    ) -> str:
        request = build_completion_request(
            file_content,
            language,
            offset,
            allow_multi_line,
            snippet_contexts,
            context_id=self._context_id,
        )
        logger.debug(
            f"Requesting completion at {request.options.code_path} "
            f"with {len(snippet_contexts)} snippet contexts"
        )
        response = await self._client.completion(request)
        return response.output.source
