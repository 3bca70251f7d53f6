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

"""Language detection from file names."""

from enum import Enum
from pathlib import PurePath
from typing import Union

from codemaker_inline.errors import UnsupportedLanguageError


class Language(str, Enum):
    """Languages understood by the completion backend."""

    JAVA = "JAVA"
    JAVASCRIPT = "JAVASCRIPT"
    TYPESCRIPT = "TYPESCRIPT"
    KOTLIN = "KOTLIN"
    GO = "GO"
    CSHARP = "CSHARP"


# File extension (without dot) -> language
EXTENSION_TO_LANGUAGE: dict[str, Language] = {
    "java": Language.JAVA,
    "js": Language.JAVASCRIPT,
    "jsx": Language.JAVASCRIPT,
    "ts": Language.TYPESCRIPT,
    "tsx": Language.TYPESCRIPT,
    "kt": Language.KOTLIN,
    "go": Language.GO,
    "cs": Language.CSHARP,
}


def _extension(file_name: Union[str, PurePath]) -> str:
    return PurePath(file_name).suffix[1:]


def is_file_supported(file_name: Union[str, PurePath]) -> bool:
    """Check whether a file's extension maps to a supported language."""
    return _extension(file_name) in EXTENSION_TO_LANGUAGE


def lang_from_file_extension(file_name: Union[str, PurePath]) -> Language:
    """Resolve the language of a file from its extension.

    Args:
        file_name: File name or path

    Returns:
        The matching language

    Raises:
        UnsupportedLanguageError: If the file has no extension or an unknown one
    """
    ext = _extension(file_name)
    if not ext:
        raise UnsupportedLanguageError(
            message=f"Could not determine file language {file_name}",
        )
    language = EXTENSION_TO_LANGUAGE.get(ext)
    if language is None:
        raise UnsupportedLanguageError(
            language=ext,
            message=f"Language is not supported for file with extension {ext}",
        )
    return language
