"""
Test suite for fuzzy matching.
"""

import pytest

from sim_commander.utils.fuzzy_match import (
    FuzzyMatcher,
    FuzzyMatchResult,
    levenshtein_distance,
)


class TestLevenshteinDistance:
    """Test the edit distance helper."""

    @pytest.mark.parametrize("first,second,expected", [
        ("kitten", "sitting", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("same", "same", 0),
        ("flaw", "lawn", 2),
    ])
    def test_known_distances(self, first, second, expected):
        assert levenshtein_distance(first, second) == expected

    def test_distance_is_symmetric(self):
        assert levenshtein_distance("install app", "uninstall") == levenshtein_distance("uninstall", "install app")


class TestFuzzyMatcher:
    """Test scoring, ranking and thresholds."""

    def test_identical_strings_score_one(self):
        assert FuzzyMatcher.calculate_score("Tap", "tap") == 1.0

    def test_empty_strings_score_one(self):
        assert FuzzyMatcher.calculate_score("", "") == 1.0

    def test_blank_input_returns_leading_candidates(self):
        candidates = ["a", "b", "c", "d"]

        matches = FuzzyMatcher.find_matches("   ", candidates, max_results=2)

        assert matches == [
            FuzzyMatchResult(item="a", score=0.5, distance=0),
            FuzzyMatchResult(item="b", score=0.5, distance=0),
        ]

    def test_prefix_boost(self):
        """A prefix gets +0.3 on top of the edit-distance score."""
        matches = FuzzyMatcher.find_matches("list", ["list simulators"], min_score=0.0)

        assert len(matches) == 1
        assert matches[0].distance == 11
        assert matches[0].score == pytest.approx(1 - 11 / 15 + 0.3)

    def test_substring_boost(self):
        matches = FuzzyMatcher.find_matches("apps", ["list apps"], min_score=0.0)

        assert matches[0].score == pytest.approx(1 - 5 / 9 + 0.2)

    def test_boosted_score_is_capped(self):
        matches = FuzzyMatcher.find_matches("tap", ["tap"])

        assert matches[0].score == 1.0

    def test_results_sorted_by_score(self):
        matches = FuzzyMatcher.find_matches(
            "list simulatrs", ["boot simulator", "list simulators", "list apps"], min_score=0.0
        )

        assert matches[0].item == "list simulators"
        scores = [match.score for match in matches]
        assert scores == sorted(scores, reverse=True)

    def test_ties_broken_by_distance(self):
        """Equal scores fall back to the smaller edit distance."""
        # "abxy": distance 2 over length 4; "abcXdYYY": distance 4 over length 8
        matches = FuzzyMatcher.find_matches("abcd", ["abcXdYYY", "abxy"], min_score=0.1)

        assert [match.item for match in matches] == ["abxy", "abcXdYYY"]
        assert matches[0].score == pytest.approx(matches[1].score)

    def test_min_score_filters(self):
        assert FuzzyMatcher.find_matches("zzzz", ["abc", "tap"]) == []

    def test_max_results_caps(self):
        candidates = [f"command {i}" for i in range(10)]

        matches = FuzzyMatcher.find_matches("command", candidates, max_results=3)

        assert len(matches) == 3

    def test_input_is_trimmed_and_lowercased(self):
        matches = FuzzyMatcher.find_matches("  LIST APPS ", ["list apps"])

        assert matches[0].distance == 0
        assert matches[0].score == 1.0

    def test_find_best_match(self):
        best = FuzzyMatcher.find_best_match("swipe", ["tap", "swipe", "press key"])

        assert best is not None
        assert best.item == "swipe"

    def test_find_best_match_none(self):
        assert FuzzyMatcher.find_best_match("§§§§§§", ["tap", "swipe"]) is None
