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

"""Inline AI code completion for editors.

Package Structure:
    completion/     - Trigger controller, cancellation, backend contract, import follow-up
    context/        - Local context retrieval from neighbouring open documents
    indentation/    - Brace-depth aware re-indentation of completion text
    config.py       - Completion settings snapshot
    errors.py       - Backend errors
    languages.py    - Language detection from file extensions
"""

from codemaker_inline.completion import (
    CancellationToken,
    InlineCompletionController,
    InlineCompletionItem,
    InlineCompletionParams,
)
from codemaker_inline.config import CompletionSettings
from codemaker_inline.context import LocalContextRetriever
from codemaker_inline.errors import (
    AuthenticationError,
    CodemakerError,
    UnsupportedLanguageError,
)
from codemaker_inline.indentation import Indenter

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "CancellationToken",
    "CodemakerError",
    "CompletionSettings",
    "Indenter",
    "InlineCompletionController",
    "InlineCompletionItem",
    "InlineCompletionParams",
    "LocalContextRetriever",
    "UnsupportedLanguageError",
]
