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

"""Local code context for completion requests.

Finds code in other open documents that resembles the code before the
cursor, to give the completion backend extra context.
"""

from codemaker_inline.context.documents import (
    DocumentDirectory,
    FileSystemDocumentDirectory,
    InMemoryDocumentDirectory,
)
from codemaker_inline.context.jaccard import (
    JaccardMatch,
    bag_of_words,
    find_best_window,
    jaccard_distance,
)
from codemaker_inline.context.retriever import (
    CodeSnippetContext,
    LocalContextRetriever,
    select_nearby_documents,
)

__all__ = [
    "CodeSnippetContext",
    "DocumentDirectory",
    "FileSystemDocumentDirectory",
    "InMemoryDocumentDirectory",
    "JaccardMatch",
    "LocalContextRetriever",
    "bag_of_words",
    "find_best_window",
    "jaccard_distance",
    "select_nearby_documents",
]
