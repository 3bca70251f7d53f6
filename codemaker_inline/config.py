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

"""Inline completion settings.

Settings are read from the host editor once per completion request and
passed to the controller as an immutable snapshot.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

# Host editor setting key -> field name
EDITOR_SETTING_KEYS: dict[str, str] = {
    "codemaker.enableAutocomplete": "autocomplete_enabled",
    "codemaker.allowMultiLineAutocomplete": "allow_multi_line",
    "codemaker.allowLocalContext": "allow_local_context",
    "codemaker.completionDelay": "completion_delay_ms",
}


class CompletionSettings(BaseModel):
    """Configuration snapshot for one inline completion request."""

    model_config = ConfigDict(frozen=True)

    autocomplete_enabled: bool = Field(
        default=True, description="Whether inline completions are requested at all"
    )
    allow_multi_line: bool = Field(
        default=True, description="Allow the backend to return multi-line completions"
    )
    allow_local_context: bool = Field(
        default=True, description="Attach snippets from other open documents to requests"
    )
    completion_delay_ms: int = Field(
        default=300, ge=0, description="Quiet period before a request is issued"
    )
    minimum_line_length: int = Field(
        default=0, ge=0, description="Minimum trimmed line length for a request (0 = any)"
    )
    indentation_char: str = Field(
        default=" ", min_length=1, max_length=1, description="Indentation character"
    )
    indentation_width: int = Field(
        default=4, ge=1, description="Indentation characters per nesting level"
    )

    @property
    def completion_delay(self) -> float:
        """Completion delay in seconds."""
        return self.completion_delay_ms / 1000

    @classmethod
    def from_editor_settings(cls, settings: Mapping[str, Any]) -> "CompletionSettings":
        """Build a snapshot from the host editor's flat settings.

        Args:
            settings: Editor settings keyed like ``codemaker.enableAutocomplete``

        Returns:
            Settings snapshot; unknown keys are ignored
        """
        values = {
            field_name: settings[key]
            for key, field_name in EDITOR_SETTING_KEYS.items()
            if key in settings and settings[key] is not None
        }
        return cls(**values)
