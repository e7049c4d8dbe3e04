"""
Fuzzy string matching for command suggestions.

Scores are normalized Levenshtein similarities in [0, 1] with a boost for
candidates that start with, or contain, the input.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Optional, Sequence

PREFIX_BOOST = 0.3
SUBSTRING_BOOST = 0.2
TIE_TOLERANCE = 0.01
BLANK_INPUT_SCORE = 0.5


@dataclass(frozen=True)
class FuzzyMatchResult:
    """A candidate that cleared the score threshold."""

    item: str
    score: float
    distance: int


def levenshtein_distance(first: str, second: str) -> int:
    """Classic edit distance (insert, delete, substitute all cost 1)."""
    if len(first) < len(second):
        first, second = second, first

    previous = list(range(len(second) + 1))
    for i, char_a in enumerate(first, start=1):
        current = [i]
        for j, char_b in enumerate(second, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current

    return previous[-1]


class FuzzyMatcher:
    """Stateless fuzzy matcher used for suggestions and completions."""

    @staticmethod
    def _base_score(distance: int, input_length: int, target_length: int) -> float:
        max_length = max(input_length, target_length)
        if max_length == 0:
            return 1.0
        return max(0.0, min(1.0, 1 - distance / max_length))

    @classmethod
    def calculate_score(cls, input_text: str, target: str) -> float:
        """Similarity between two strings, 1.0 meaning identical."""
        distance = levenshtein_distance(input_text.lower(), target.lower())
        return cls._base_score(distance, len(input_text), len(target))

    @staticmethod
    def _compare(a: FuzzyMatchResult, b: FuzzyMatchResult) -> int:
        if abs(a.score - b.score) < TIE_TOLERANCE:
            return a.distance - b.distance
        return -1 if a.score > b.score else 1

    @classmethod
    def find_matches(
        cls,
        input_text: str,
        candidates: Sequence[str],
        max_results: int = 5,
        min_score: float = 0.3
    ) -> List[FuzzyMatchResult]:
        """
        Rank candidates by similarity to the input.

        Args:
            input_text: Text typed by the user
            candidates: Strings to match against
            max_results: Maximum number of results returned
            min_score: Minimum boosted score a candidate needs

        Returns:
            Matches sorted by score, ties broken by edit distance
        """
        if not input_text.strip():
            return [
                FuzzyMatchResult(item=item, score=BLANK_INPUT_SCORE, distance=0)
                for item in candidates[:max_results]
            ]

        normalized = input_text.strip().lower()
        results: List[FuzzyMatchResult] = []

        for candidate in candidates:
            lowered = candidate.lower()
            distance = levenshtein_distance(normalized, lowered)
            score = cls._base_score(distance, len(normalized), len(candidate))

            if lowered.startswith(normalized):
                score = min(1.0, score + PREFIX_BOOST)
            elif normalized in lowered:
                score = min(1.0, score + SUBSTRING_BOOST)

            if score >= min_score:
                results.append(FuzzyMatchResult(item=candidate, score=score, distance=distance))

        results.sort(key=cmp_to_key(cls._compare))
        return results[:max_results]

    @classmethod
    def find_best_match(
        cls,
        input_text: str,
        candidates: Sequence[str],
        min_score: float = 0.3
    ) -> Optional[FuzzyMatchResult]:
        """Return the single best match, or None when nothing clears the threshold."""
        matches = cls.find_matches(input_text, candidates, 1, min_score)
        return matches[0] if matches else None
