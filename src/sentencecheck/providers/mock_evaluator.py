"""Mock spelling evaluator for testing and offline use."""

import difflib
from typing import Iterable, List, Sequence

from ..core.types import SuggestionAttributes, SuggestionResult, TextUnit

DEFAULT_WORDS = (
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "have", "he",
    "i", "in", "is", "it", "its", "mr", "mrs", "of", "on", "or", "pi", "she", "that",
    "the", "this", "to", "was", "were", "will", "with", "you",
    "check", "every", "hello", "language", "letter", "quick", "brown", "fox", "jumps",
    "over", "lazy", "dog", "sentence", "smith", "spelling", "text", "word", "world",
)


class MockEvaluator:
    """A deterministic dictionary-backed evaluator for testing and offline use."""

    def __init__(self, words: Iterable[str] = DEFAULT_WORDS, *,
                 drop_sequences: Iterable[int] = (), reverse: bool = False,
                 cutoff: float = 0.6):
        """Initialize mock evaluator.

        Args:
            words: Dictionary of correctly spelled words (matched case-insensitively)
            drop_sequences: Word sequences whose results are never delivered
            reverse: Deliver results in reverse order
            cutoff: Minimum similarity ratio for a suggestion
        """
        self.words = sorted({w.lower() for w in words})
        self._lookup = set(self.words)
        self.drop_sequences = frozenset(drop_sequences)
        self.reverse = reverse
        self.cutoff = cutoff
        self.calls: List[Sequence[TextUnit]] = []

    def evaluate(self, units: Sequence[TextUnit], suggestions_limit: int) -> List[SuggestionResult]:
        """Evaluate each unit against the dictionary.

        Known words and words without letters are flagged IN_THE_DICTIONARY. Unknown words are flagged
        LOOKS_LIKE_TYPO with close dictionary matches as suggestions.
        """
        self.calls.append(tuple(units))
        results = [self._evaluate_one(unit, suggestions_limit) for unit in units
                   if unit.sequence not in self.drop_sequences]
        if self.reverse:
            results.reverse()
        return results

    def _evaluate_one(self, unit: TextUnit, suggestions_limit: int) -> SuggestionResult:
        word = unit.text.lower()
        # Numbers and symbols have nothing to spell
        if word in self._lookup or not any(c.isalpha() for c in word):
            return SuggestionResult(attributes=SuggestionAttributes.IN_THE_DICTIONARY,
                                    cookie=unit.cookie, sequence=unit.sequence)

        suggestions = ()
        if suggestions_limit > 0:
            suggestions = tuple(difflib.get_close_matches(word, self.words, n=suggestions_limit,
                                                          cutoff=self.cutoff))
        attributes = SuggestionAttributes.LOOKS_LIKE_TYPO
        if suggestions:
            attributes |= SuggestionAttributes.HAS_RECOMMENDED_SUGGESTIONS
        return SuggestionResult(attributes=attributes, suggestions=suggestions,
                                cookie=unit.cookie, sequence=unit.sequence)


def create_mock_evaluator(words: Iterable[str] = DEFAULT_WORDS) -> MockEvaluator:
    """Create a mock evaluator instance."""
    return MockEvaluator(words=words)
