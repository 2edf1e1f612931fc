"""
pyspellchecker Spelling Evaluator for sentencecheck

Implements the SpellingEvaluator protocol on top of the ``pyspellchecker``
package. The package is optional: install it with
``pip install sentencecheck[pyspellchecker]``.
"""

from typing import List, Optional, Sequence

from ..core.types import SuggestionAttributes, SuggestionResult, TextUnit

# Optional import for pyspellchecker - gracefully handle if not available
try:
    from spellchecker import SpellChecker
    PYSPELLCHECKER_AVAILABLE = True
except ImportError:
    PYSPELLCHECKER_AVAILABLE = False
    SpellChecker = None


class PySpellEvaluator:
    """
    Word-frequency spelling evaluator backed by pyspellchecker.

    Follows the injection pattern: the host builds the evaluator and hands it to
    SentenceLevelAdapter.check_sentences rather than the adapter depending on it.
    """

    def __init__(self, language: str = "en", distance: int = 2, case_sensitive: bool = False):
        """
        Initialize the evaluator.

        Args:
            language: pyspellchecker dictionary language (en, es, fr, de, ...)
            distance: Maximum edit distance for candidate suggestions
            case_sensitive: Look words up without lowercasing them
        """
        if not PYSPELLCHECKER_AVAILABLE:
            raise ImportError(
                "pyspellchecker package is not installed. Install it with: pip install pyspellchecker"
            )

        self.language = language
        self.distance = distance
        self.case_sensitive = case_sensitive
        self.spell = SpellChecker(language=language, distance=distance,
                                  case_sensitive=case_sensitive)

    def evaluate(self, units: Sequence[TextUnit], suggestions_limit: int) -> List[SuggestionResult]:
        """
        Evaluate each unit, ranking candidates by word frequency.

        Args:
            units: Word units to evaluate
            suggestions_limit: Maximum number of suggestions per word

        Returns:
            List[SuggestionResult]: One result per unit, in input order
        """
        return [self._evaluate_one(unit, suggestions_limit) for unit in units]

    def _evaluate_one(self, unit: TextUnit, suggestions_limit: int) -> SuggestionResult:
        word = unit.text if self.case_sensitive else unit.text.lower()

        if not any(c.isalpha() for c in word) or self.spell.known([word]):
            return SuggestionResult(attributes=SuggestionAttributes.IN_THE_DICTIONARY,
                                    cookie=unit.cookie, sequence=unit.sequence)

        candidates = self.spell.candidates(word) or set()
        candidates.discard(word)
        # Most frequent first, alphabetical among ties
        ranked = sorted(candidates, key=lambda c: (-self.spell.word_usage_frequency(c), c))
        suggestions = tuple(ranked[:max(suggestions_limit, 0)])

        attributes = SuggestionAttributes.LOOKS_LIKE_TYPO
        if suggestions:
            attributes |= SuggestionAttributes.HAS_RECOMMENDED_SUGGESTIONS
        return SuggestionResult(attributes=attributes, suggestions=suggestions,
                                cookie=unit.cookie, sequence=unit.sequence)

    def __repr__(self) -> str:
        return f"PySpellEvaluator(language='{self.language}', distance={self.distance})"


def create_pyspell_evaluator(language: str = "en") -> Optional[PySpellEvaluator]:
    """
    Create a pyspellchecker evaluator with default settings.

    Returns:
        Configured PySpellEvaluator, or None if pyspellchecker is not available
        or has no dictionary for ``language``
    """
    try:
        return PySpellEvaluator(language=language)
    except (ImportError, ValueError):
        return None


def is_pyspellchecker_available() -> bool:
    """Check if the pyspellchecker package is installed."""
    return PYSPELLCHECKER_AVAILABLE
