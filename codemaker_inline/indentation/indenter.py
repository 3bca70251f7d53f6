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

"""Brace-depth aware re-indentation of completion text.

The backend returns code in its own indentation style. The indenter
re-expresses every line using the caller's indentation unit and the
nesting depth at the cursor, so an inserted block lines up with the
surrounding code:

    indenter = Indenter.from_input(" ", 4, "    if (x) {")
    indenter.align_indentation("\\n  doWork();\\n}")
    # -> "\\n        doWork();\\n    }"
"""

from dataclasses import dataclass

INDENT_WHITESPACE = (" ", "\t")


@dataclass(frozen=True)
class IndentationPlan:
    """Indentation derived from the line preceding the cursor."""

    unit_char: str
    unit_width: int
    base_depth: int  # Always >= 0
    base_indentation: str

    def indentation(self, depth: int) -> str:
        """Leading whitespace for a line at the given depth."""
        return self.base_indentation + self.unit_char * (self.unit_width * max(depth, 0))


def leading_whitespace(line: str) -> str:
    """Return the leading whitespace run of a line."""
    return line[: len(line) - len(line.lstrip())]


def brace_depth(line: str) -> int:
    """Net ``{``/``}`` balance of a line, never dropping below zero."""
    depth = 0
    for char in line:
        if char == "{":
            depth += 1
        elif char == "}":
            depth = max(depth - 1, 0)
    return depth


class Indenter:
    """Aligns completion text to an indentation plan."""

    def __init__(self, plan: IndentationPlan):
        self._plan = plan

    @property
    def plan(self) -> IndentationPlan:
        return self._plan

    @classmethod
    def from_input(cls, unit_char: str, unit_width: int, line: str) -> "Indenter":
        """Create an indenter from the line preceding the cursor.

        Args:
            unit_char: Indentation character (space or tab)
            unit_width: Number of characters per nesting level
            line: Source line the completion continues

        Returns:
            Indenter whose base depth is the line's brace balance
        """
        return cls(
            IndentationPlan(
                unit_char=unit_char,
                unit_width=unit_width,
                base_depth=brace_depth(line),
                base_indentation=leading_whitespace(line),
            )
        )

    def align_indentation(self, source: str) -> str:
        """Replace the leading whitespace of every line after the first.

        A line whose first non-whitespace character is ``}`` is indented
        one level less than the block it closes. Only whitespace that
        follows a newline is rewritten, so aligning already aligned text
        returns it unchanged.

        Args:
            source: Completion text

        Returns:
            Re-indented text
        """
        output: list[str] = []
        depth = self._plan.base_depth
        i = 0
        length = len(source)

        while i < length:
            char = source[i]
            output.append(char)
            i += 1

            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
            elif char == "\n":
                j = i
                while j < length and source[j] in INDENT_WHITESPACE:
                    j += 1
                shift = -1 if j < length and source[j] == "}" else 0
                output.append(self._plan.indentation(depth + shift))
                i = j

        return "".join(output)
