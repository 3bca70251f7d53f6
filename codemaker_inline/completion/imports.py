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

"""Import resolution after a completion is accepted.

Accepted completions often use names that are not imported yet. The
host runs ``RESOLVE_IMPORTS_COMMAND`` after acceptance; the resolver asks
the editor for quick fixes over the inserted text and applies the import
fix when there is exactly one.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence

from codemaker_inline.completion.protocol import Position, Range

logger = logging.getLogger(__name__)

RESOLVE_IMPORTS_COMMAND = "codemaker.resolveImports"

IMPORT_ACTION_PATTERNS = [
    re.compile(r"Add import.*"),
    re.compile(r"Update import from .*"),
    re.compile(r"Import .*"),
]


@dataclass
class CodeAction:
    """A quick fix offered by the editor."""

    title: str
    edit: Optional[Any] = None  # Opaque workspace edit


class CodeActionSource(Protocol):
    """Editor access to quick fixes."""

    async def quick_fixes(self, file_path: Path, range: Range) -> Sequence[CodeAction]: ...

    async def apply(self, edit: Any) -> bool: ...


def resolve_imports_command(insert_text: str) -> dict[str, Any]:
    """Follow-up command attached to an emitted completion."""
    return {"command": RESOLVE_IMPORTS_COMMAND, "arguments": [insert_text]}


def completion_range(completion: str, cursor: Position) -> Range:
    """Range occupied by an accepted completion that ends at the cursor."""
    lines = completion.split("\n")
    if len(lines) > 1:
        start = Position(line=max(cursor.line - (len(lines) - 1), 0), character=0)
    else:
        start = Position(line=cursor.line, character=max(cursor.character - len(completion), 0))
    return Range(start=start, end=cursor)


def is_import_action(action: CodeAction) -> bool:
    return any(pattern.search(action.title) for pattern in IMPORT_ACTION_PATTERNS)


class ImportResolver:
    """Applies the import quick fix for an accepted completion."""

    def __init__(self, code_actions: CodeActionSource):
        self._code_actions = code_actions

    async def resolve(self, file_path: Path, completion: str, cursor: Position) -> bool:
        """Apply the single import fix available for a completion.

        Args:
            file_path: Document the completion was accepted in
            completion: Accepted completion text
            cursor: Cursor position after acceptance

        Returns:
            True if an import edit was applied
        """
        fix_range = completion_range(completion, cursor)
        fixes = await self._code_actions.quick_fixes(file_path, fix_range)
        import_fixes = [fix for fix in fixes if is_import_action(fix)]

        # Only an unambiguous import fix is applied
        if len(import_fixes) != 1 or import_fixes[0].edit is None:
            logger.debug(f"Found {len(import_fixes)} import fixes, skipping auto import")
            return False

        logger.debug(f"Applying import fix: {import_fixes[0].title}")
        return await self._code_actions.apply(import_fixes[0].edit)
