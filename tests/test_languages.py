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

"""Tests for language detection and completion parameters."""

from pathlib import Path

import pytest

from codemaker_inline.completion import InlineCompletionParams, Position
from codemaker_inline.errors import UnsupportedLanguageError
from codemaker_inline.languages import Language, is_file_supported, lang_from_file_extension


class TestLanguages:
    """Tests for lang_from_file_extension."""

    def test_known_extensions(self):
        assert lang_from_file_extension("Main.java") is Language.JAVA
        assert lang_from_file_extension("src/app/view.tsx") is Language.TYPESCRIPT
        assert lang_from_file_extension(Path("build.kt")) is Language.KOTLIN
        assert lang_from_file_extension("Program.cs") is Language.CSHARP

    def test_unsupported_extension(self):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            lang_from_file_extension("script.py")

        assert exc_info.value.language == "py"

    def test_missing_extension(self):
        with pytest.raises(UnsupportedLanguageError):
            lang_from_file_extension("Makefile")

    def test_is_file_supported(self):
        assert is_file_supported("index.js")
        assert not is_file_supported("README.md")

    def test_error_message(self):
        assert str(UnsupportedLanguageError("RUST")) == "RUST is not supported yet"


class TestInlineCompletionParams:
    """Tests for InlineCompletionParams.from_document."""

    def test_offset_and_line_split(self):
        params = InlineCompletionParams.from_document("ab\ncd", 1, 1, language="JAVA")

        assert params.position == Position(line=1, character=1)
        assert params.offset == 4
        assert params.line_prefix == "c"
        assert params.line_suffix == "d"
        assert params.line_count == 2

    def test_crlf_offset(self):
        params = InlineCompletionParams.from_document("ab\r\ncd", 1, 1, language="JAVA")

        assert params.offset == 5
        assert params.line_text == "cd"

    def test_character_clamped_to_line(self):
        params = InlineCompletionParams.from_document("ab\ncd", 0, 10, language="JAVA")

        assert params.position.character == 2
        assert params.offset == 2

    def test_language_from_path(self):
        params = InlineCompletionParams.from_document("x", 0, 1, file_path=Path("Main.kt"))

        assert params.language == "KOTLIN"

    def test_line_out_of_range(self):
        with pytest.raises(ValueError):
            InlineCompletionParams.from_document("x", 3, 0, language="JAVA")
