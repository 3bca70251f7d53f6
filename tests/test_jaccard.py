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

"""Tests for bag-of-words Jaccard scoring."""

from collections import Counter

from codemaker_inline.context import bag_of_words, find_best_window, jaccard_distance


class TestBagOfWords:
    """Tests for bag_of_words."""

    def test_counts_lowercased_words(self):
        assert bag_of_words(["Foo bar", "foo"]) == Counter({"foo": 2, "bar": 1})

    def test_punctuation_runs_are_one_token(self):
        bag = bag_of_words(["foo();", "bar(); "])

        assert bag == Counter({"foo": 1, "bar": 1, "": 2})

    def test_empty(self):
        assert bag_of_words([]) == Counter()


class TestJaccardDistance:
    """Tests for jaccard_distance."""

    def test_multiset_example(self):
        anchor = Counter({"foo": 2, "bar": 1})
        window = Counter({"foo": 1, "bar": 1, "baz": 1})

        assert jaccard_distance(anchor, window) == 0.5

    def test_identical_bags(self):
        bag = Counter({"foo": 3, "bar": 1})

        assert jaccard_distance(bag, Counter(bag)) == 0.0

    def test_disjoint_bags(self):
        assert jaccard_distance(Counter({"foo": 1}), Counter({"bar": 2})) == 1.0

    def test_bounded(self):
        pairs = [
            (Counter({"a": 1}), Counter({"a": 5, "b": 1})),
            (Counter({"a": 4, "c": 2}), Counter({"a": 1})),
            (Counter(), Counter({"x": 1})),
        ]
        for target, window in pairs:
            assert 0.0 <= jaccard_distance(target, window) <= 1.0


class TestFindBestWindow:
    """Tests for find_best_window."""

    def test_picks_matching_window(self):
        match_text = "\n".join(["one two", "three four", "alpha beta", "five six"])

        match = find_best_window("alpha beta", match_text, 1)

        assert match.score == 0.0
        assert match.matched_text == "alpha beta"

    def test_short_document_is_single_window(self):
        match_text = "alpha\nbeta\ngamma"

        match = find_best_window("alpha beta gamma", match_text, 30)

        assert match.matched_text == match_text
        assert match.score < 1.0

    def test_nothing_in_common(self):
        match = find_best_window("alpha", "omega", 30)

        assert match.score == 1.0
        assert match.matched_text == ""

    def test_crlf_lines(self):
        match = find_best_window("gamma", "alpha\r\nbeta\r\ngamma", 1)

        assert match.matched_text == "gamma"
