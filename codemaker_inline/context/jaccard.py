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

"""Bag-of-words Jaccard similarity over sliding line windows.

Scores are Jaccard *distances* computed over multisets of lower-cased
words: 0 means identical bags, 1 means nothing in common.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

NON_WORD_REGEX = re.compile(r"[^\w]+")
LINE_BREAK_REGEX = re.compile(r"\r?\n")


@dataclass(frozen=True)
class JaccardMatch:
    """Best-scoring window found in one document."""

    score: float
    matched_text: str


def split_lines(text: str) -> list[str]:
    """Split text on LF or CRLF line breaks."""
    return LINE_BREAK_REGEX.split(text)


def bag_of_words(lines: Iterable[str]) -> Counter:
    """Count lower-cased words across lines.

    Punctuation-only runs split into empty tokens, which all count as the
    same word.
    """
    bag: Counter = Counter()
    for line in lines:
        bag.update(word.lower() for word in NON_WORD_REGEX.split(line))
    return bag


def jaccard_distance(target: Counter, window: Counter) -> float:
    """Multiset Jaccard distance between two bags of words.

    Args:
        target: Bag of the text being matched against
        window: Bag of a candidate window

    Returns:
        Distance in [0, 1]
    """
    intersection = sum(min(count, target[word]) for word, count in window.items() if word in target)
    union = sum(max(count, window.get(word, 0)) for word, count in target.items())
    union += sum(count for word, count in window.items() if word not in target)

    if union == 0:
        return 0.0
    return 1 - intersection / union


def find_best_window(target_text: str, match_text: str, window_size: int) -> JaccardMatch:
    """Find the window of ``match_text`` closest to ``target_text``.

    Windows of ``window_size`` lines start at every line. A document
    shorter than the window is scored as a single window. When no window
    shares anything with the target the match is empty with score 1.

    Args:
        target_text: Text to match (usually the code before the cursor)
        match_text: Candidate document content
        window_size: Window height in lines

    Returns:
        The lowest-distance window
    """
    target_bag = bag_of_words(split_lines(target_text))
    match_lines = split_lines(match_text)

    best_score = 1.0
    best_window: list[str] = []

    last_start = max(0, len(match_lines) - window_size)
    for start in range(last_start + 1):
        window = match_lines[start : start + window_size]
        score = jaccard_distance(target_bag, bag_of_words(window))
        if score < best_score:
            best_score = score
            best_window = window

    return JaccardMatch(score=best_score, matched_text="\n".join(best_window))
