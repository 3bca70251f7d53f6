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

"""Tests for the completion backend contract."""

from unittest.mock import AsyncMock

import pytest

from codemaker_inline.completion import (
    ClientCompletionBackend,
    CompletionBackend,
    CompletionRequest,
    CompletionResponse,
    build_completion_request,
)
from codemaker_inline.context import CodeSnippetContext
from codemaker_inline.errors import AuthenticationError

SNIPPET = CodeSnippetContext(
    language="java", snippet="return a + b;", relative_path="src/Adder.java", score=0.25
)


class TestCompletionRequest:
    """Tests for request composition."""

    def test_payload(self):
        request = build_completion_request("int x = ", "JAVA", 8, True, [SNIPPET])

        assert request.to_payload() == {
            "language": "JAVA",
            "input": {"source": "int x = "},
            "options": {
                "codePath": "@8",
                "allowMultiLineAutocomplete": True,
                "codeSnippetContexts": [
                    {
                        "language": "java",
                        "snippet": "return a + b;",
                        "relativePath": "src/Adder.java",
                        "score": 0.25,
                    }
                ],
            },
        }

    def test_context_id(self):
        request = build_completion_request("", "GO", 0, False, [], context_id="ctx-1")

        assert request.to_payload()["options"]["contextId"] == "ctx-1"

    def test_response_parsing(self):
        response = CompletionResponse.model_validate({"output": {"source": "foo();"}})

        assert response.output.source == "foo();"
        assert CompletionResponse().output.source == ""


class TestClientCompletionBackend:
    """Tests for ClientCompletionBackend."""

    @pytest.mark.asyncio
    async def test_returns_output_source(self):
        client = AsyncMock()
        client.completion.return_value = CompletionResponse.model_validate(
            {"output": {"source": "th.max(a, b);"}}
        )
        backend = ClientCompletionBackend(client)

        output = await backend.complete("return ma", "JAVA", 9, True, [SNIPPET])

        assert output == "th.max(a, b);"
        request = client.completion.await_args.args[0]
        assert isinstance(request, CompletionRequest)
        assert request.options.code_path == "@9"
        assert request.options.code_snippet_contexts[0].relative_path == "src/Adder.java"

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        client = AsyncMock()
        client.completion.side_effect = AuthenticationError("invalid API key")

        with pytest.raises(AuthenticationError):
            await ClientCompletionBackend(client).complete("", "JAVA", 0, True, [])

    def test_satisfies_protocol(self):
        assert isinstance(ClientCompletionBackend(AsyncMock()), CompletionBackend)
