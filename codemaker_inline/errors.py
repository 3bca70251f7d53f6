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

"""Errors raised by the completion backend.

None of these are handled by the inline completion pipeline; they reach
the host editor unchanged, which decides how to report them.
"""

from typing import Optional


class CodemakerError(Exception):
    """Base class for completion service errors."""


class AuthenticationError(CodemakerError):
    """Raised when the backend rejects the configured credentials."""


class UnsupportedLanguageError(CodemakerError):
    """Raised when a language (or file extension) is not supported."""

    def __init__(self, language: Optional[str] = None, message: Optional[str] = None):
        self.language = language
        super().__init__(message or f"{language} is not supported yet")
