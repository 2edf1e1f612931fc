"""Test the sentence level adapter end to end."""

import numpy as np
import pytest

from sentencecheck.core.types import (
    EMPTY_SENTENCE_RESULTS,
    EMPTY_SUGGESTIONS,
    SentenceResult,
    SuggestionAttributes,
    TextUnit,
)
from sentencecheck.locales.spacing import SpacingAndPunctuations
from sentencecheck.providers.mock_evaluator import MockEvaluator
from sentencecheck.runtime.sentence_adapter import SentenceLevelAdapter


class _SilentEvaluator:
    """Evaluator that never delivers anything."""

    def evaluate(self, units, suggestions_limit):
        return []


class _FailingEvaluator:
    def evaluate(self, units, suggestions_limit):
        raise RuntimeError("dictionary offline")


class TestSentenceLevelAdapter:
    """Test check_sentences and the adapter's logging."""

    def test_adapter_initialization(self, test_logger, test_meter):
        """Test adapter initialization."""
        adapter = SentenceLevelAdapter("bn-BD", logger=test_logger, meter=test_meter)

        assert adapter.locale == "bn_BD"
        assert adapter.spacing.is_word_separator(ord("।"))
        assert adapter.log == test_logger
        assert adapter.meter == test_meter

    def test_adapter_with_custom_table(self, sample_locales):
        """Test resolving the locale against a custom table."""
        adapter = SentenceLevelAdapter("xx", table=sample_locales)

        assert [i.text_unit.text for i in adapter.segment("a b-c", cookie=0).items] == ["a b", "c"]

    def test_adapter_with_resolved_spacing(self):
        """Test passing an already resolved configuration."""
        spacing = SpacingAndPunctuations(locale="zz", word_separators=frozenset(map(ord, ",")))
        adapter = SentenceLevelAdapter(spacing)

        assert adapter.spacing is spacing
        assert adapter.segment("a b,c", cookie=0).size == 2

    def test_check_sentences(self, en_adapter, mock_evaluator):
        """Test checking several sentences."""
        units = [TextUnit("Teh quick fox", cookie=1, sequence=10),
                 TextUnit("Hello wrld.", cookie=2, sequence=11)]

        results = en_adapter.check_sentences(units, mock_evaluator, suggestions_limit=3)

        assert len(results) == 2
        first, second = results
        assert isinstance(first, SentenceResult)
        assert (first.cookie, first.sequence) == (1, 10)
        np.testing.assert_array_equal(first.offsets, [0, 4, 10])
        np.testing.assert_array_equal(first.lengths, [3, 5, 3])
        assert SuggestionAttributes.LOOKS_LIKE_TYPO in first.suggestions[0].attributes
        assert "the" in first.suggestions[0].suggestions
        assert first.suggestions[1].attributes == SuggestionAttributes.IN_THE_DICTIONARY
        assert all(s.cookie == 1 and s.sequence == 10 for s in first.suggestions)

        # Trailing period stays on the last word
        np.testing.assert_array_equal(second.offsets, [0, 6])
        np.testing.assert_array_equal(second.lengths, [5, 5])
        assert second.suggestions[0].attributes == SuggestionAttributes.IN_THE_DICTIONARY

    def test_suggestions_limit_passed(self, en_adapter, mock_evaluator):
        """Test that the suggestion limit reaches the evaluator."""
        results = en_adapter.check_sentences([TextUnit("wrd", cookie=0)], mock_evaluator,
                                             suggestions_limit=1)

        assert len(results[0].suggestions[0].suggestions) <= 1

    def test_empty_batch_returns_shared_empty(self, en_adapter, mock_evaluator):
        """Test that an empty batch returns the shared empty tuple."""
        assert en_adapter.check_sentences([], mock_evaluator) is EMPTY_SENTENCE_RESULTS
        assert mock_evaluator.calls == []

    def test_wordless_sentence(self, en_adapter, mock_evaluator):
        """Test that a separator-only sentence yields a zero-length result."""
        results = en_adapter.check_sentences([TextUnit(" ... ", cookie=5)], mock_evaluator)

        assert len(results) == 1
        assert results[0].query_size == 0
        assert results[0].cookie == 5
        assert mock_evaluator.calls == []

    def test_scrambled_and_incomplete_delivery(self, en_adapter):
        """Test results delivered out of order with one word missing."""
        evaluator = MockEvaluator(drop_sequences={1}, reverse=True)

        results = en_adapter.check_sentences([TextUnit("the dog sat", cookie=3)], evaluator)

        sentence = results[0]
        assert sentence.query_size == 3
        assert sentence.suggestions[0].attributes == SuggestionAttributes.IN_THE_DICTIONARY
        assert sentence.suggestions[1] is EMPTY_SUGGESTIONS
        assert sentence.suggestions[2].cookie == 3
        np.testing.assert_array_equal(sentence.offsets, [0, 4, 8])

    def test_evaluator_returns_nothing(self, en_adapter, test_logger, test_meter):
        """Test that a silent evaluator still yields aligned offsets."""
        adapter = SentenceLevelAdapter("en", logger=test_logger, meter=test_meter)

        results = adapter.check_sentences([TextUnit("one two", cookie=8)], _SilentEvaluator())

        sentence = results[0]
        assert sentence.suggestions == (EMPTY_SUGGESTIONS, EMPTY_SUGGESTIONS)
        np.testing.assert_array_equal(sentence.offsets, [0, 4])
        assert ('warn', 'no_word_results', {'cookie': 8, 'words': 2}) in test_logger.messages
        assert test_meter.counters["sentencecheck.missing_results"] == 2

    def test_evaluator_failure_propagates(self, test_logger):
        """Test that evaluator errors are logged and re-raised."""
        adapter = SentenceLevelAdapter("en", logger=test_logger)

        with pytest.raises(RuntimeError, match="dictionary offline"):
            adapter.check_sentences([TextUnit("word", cookie=1)], _FailingEvaluator())

        levels = [msg[0] for msg in test_logger.messages]
        assert 'error' in levels

    def test_logging_and_metrics(self, mock_evaluator, test_logger, test_meter):
        """Test that segmentation and reconstruction are logged."""
        adapter = SentenceLevelAdapter("en", logger=test_logger, meter=test_meter)
        segmentation = adapter.segment("one two three", cookie=4)

        sentence = adapter.reconstruct(segmentation, mock_evaluator.evaluate(
            [segmentation.word_units[0], segmentation.word_units[2]], 5))

        assert sentence.query_size == 3
        assert ('info', 'sentence_segmented', {'cookie': 4, 'words': 3}) in test_logger.messages
        assert ('warn', 'missing_word_results', {'cookie': 4, 'missing': 1}) in test_logger.messages
        assert ('info', 'sentence_reconstructed',
                {'cookie': 4, 'words': 3, 'matched': 2}) in test_logger.messages
        assert test_meter.counters["sentencecheck.words_segmented"] == 3
        assert test_meter.counters["sentencecheck.missing_results"] == 1
        name, ratio = test_meter.observations[-1]
        assert name == "sentencecheck.match_ratio"
        assert ratio == pytest.approx(2 / 3)

    def test_adapter_reconstruct_empty(self, en_adapter, test_logger):
        """Test that the adapter's reconstruct keeps the empty contract."""
        adapter = SentenceLevelAdapter("en", logger=test_logger)
        segmentation = adapter.segment("word", cookie=0)
        test_logger.clear()

        assert adapter.reconstruct(segmentation, []) is None
        assert adapter.reconstruct(None, None) is None
        assert test_logger.messages == []

    def test_consistent_results(self, en_adapter, mock_evaluator):
        """Test that identical requests give identical results."""
        units = [TextUnit("Mr. Smith has 3.14 reasons", cookie=1)]

        first = en_adapter.check_sentences(units, mock_evaluator)
        second = en_adapter.check_sentences(units, mock_evaluator)

        assert first == second
