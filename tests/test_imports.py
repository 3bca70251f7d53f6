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

"""Tests for import resolution after acceptance."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from codemaker_inline.completion import CodeAction, ImportResolver, Position, Range
from codemaker_inline.completion.imports import completion_range, is_import_action


class TestCompletionRange:
    """Tests for the range of an accepted completion."""

    def test_multi_line(self):
        assert completion_range("a\nb\nc", Position(5, 3)) == Range(Position(3, 0), Position(5, 3))

    def test_single_line(self):
        assert completion_range("foo", Position(2, 10)) == Range(Position(2, 7), Position(2, 10))


class TestImportResolver:
    """Tests for ImportResolver."""

    @pytest.fixture
    def code_actions(self):
        code_actions = AsyncMock()
        code_actions.apply.return_value = True
        return code_actions

    def test_import_titles(self):
        assert is_import_action(CodeAction("Add import 'java.util.List'"))
        assert is_import_action(CodeAction("Update import from './utils'"))
        assert is_import_action(CodeAction("Import 'List' (java.util)"))
        assert not is_import_action(CodeAction("Rename symbol"))

    @pytest.mark.asyncio
    async def test_applies_single_import(self, code_actions):
        code_actions.quick_fixes.return_value = [
            CodeAction("Add import 'java.util.List'", edit="import-edit"),
            CodeAction("Create local variable", edit="other-edit"),
        ]

        applied = await ImportResolver(code_actions).resolve(
            Path("Main.java"), "List<String> names;", Position(3, 23)
        )

        assert applied is True
        code_actions.apply.assert_awaited_once_with("import-edit")
        _, fix_range = code_actions.quick_fixes.await_args.args
        assert fix_range == Range(Position(3, 4), Position(3, 23))

    @pytest.mark.asyncio
    async def test_ambiguous_imports_skipped(self, code_actions):
        code_actions.quick_fixes.return_value = [
            CodeAction("Import 'List' (java.util)", edit="a"),
            CodeAction("Import 'List' (java.awt)", edit="b"),
        ]

        applied = await ImportResolver(code_actions).resolve(
            Path("Main.java"), "List x;", Position(0, 7)
        )

        assert applied is False
        code_actions.apply.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_import_without_edit_skipped(self, code_actions):
        code_actions.quick_fixes.return_value = [CodeAction("Add import 'java.util.List'")]

        applied = await ImportResolver(code_actions).resolve(
            Path("Main.java"), "List x;", Position(0, 7)
        )

        assert applied is False
        code_actions.apply.assert_not_awaited()
