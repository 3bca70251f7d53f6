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

"""Cheap checks deciding whether a keystroke may trigger a completion."""

import logging
import re

from codemaker_inline.completion.protocol import InlineCompletionParams
from codemaker_inline.config import CompletionSettings

logger = logging.getLogger(__name__)

# Closing brackets/quotes, one optional trailing punctuation, then whitespace
END_OF_LINE_REGEX = re.compile(r"^\s*[)}\]\"'`]*\s*[:{;,]?\s*$")


def is_end_of_line(line_suffix: str) -> bool:
    """Check that the text after the cursor does not continue a token."""
    return END_OF_LINE_REGEX.match(line_suffix) is not None


def check_line_length(line: str, minimum: int) -> bool:
    """Check the trimmed line is at least ``minimum`` characters long."""
    return len(line.strip()) >= minimum


def should_skip(params: InlineCompletionParams, settings: CompletionSettings) -> bool:
    """Decide whether to skip a completion request without waiting."""
    if not settings.autocomplete_enabled:
        logger.debug("Autocomplete disabled")
        return True
    if not check_line_length(params.line_text, settings.minimum_line_length):
        logger.debug("Line too short for completion")
        return True
    if not is_end_of_line(params.line_suffix):
        logger.debug("Cursor is not at end of line")
        return True
    return False
