"""Sentence level spell checking on top of a per-word evaluator."""

from typing import Iterable, Optional, Sequence, Tuple, Union

from ..core.abc import Logger, Meter, SpellingEvaluator
from ..core.types import (
    EMPTY_SENTENCE_RESULTS,
    SegmentationResult,
    SentenceResult,
    SuggestionResult,
    TextUnit,
)
from ..locales.schema import LocaleTable
from ..locales.spacing import SpacingAndPunctuations, get_spacing, resolve_spacing
from ..segmenters.word_iterator import WordIterator
from ..segmenters.words import WordSegmenter
from .reconstruct import assemble, index_by_sequence, reconstruct

DEFAULT_SUGGESTIONS_LIMIT = 5


class SentenceLevelAdapter:
    """
    Splits sentences into words for a per-word evaluator and reassembles the results.

    The locale's separator configuration is resolved once, in the constructor, and
    never changes afterwards. Every request builds its own SegmentationResult, so
    one adapter may be shared between threads.
    """

    def __init__(self, locale: Union[str, SpacingAndPunctuations], *,
                 table: Optional[LocaleTable] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize the adapter for one locale.

        Args:
            locale: Locale tag (``en_US``, ``bn-BD``) or an already resolved configuration
            table: Locale table to resolve against (default: bundled table)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        if isinstance(locale, SpacingAndPunctuations):
            spacing = locale
        elif table is not None:
            spacing = resolve_spacing(locale, table)
        else:
            spacing = get_spacing(locale)

        self.spacing = spacing
        self.segmenter = WordSegmenter(WordIterator(spacing))
        self.log = logger
        self.meter = meter

    @property
    def locale(self) -> str:
        return self.spacing.locale

    def segment(self, text: str, cookie: int, sequence: int = 0) -> SegmentationResult:
        """Split ``text`` into word units addressed by ``cookie``."""
        return self.split_words(TextUnit(text=text, cookie=cookie, sequence=sequence))

    def split_words(self, original: TextUnit) -> SegmentationResult:
        """Split a sentence TextUnit into word units."""
        segmentation = self.segmenter.split_words(original)

        if self.meter:
            self.meter.inc("sentencecheck.words_segmented", segmentation.size, locale=self.locale)
        if self.log:
            self.log.info("sentence_segmented", cookie=original.cookie, words=segmentation.size)

        return segmentation

    def reconstruct(self, segmentation: Optional[SegmentationResult],
                    results: Optional[Iterable[Optional[SuggestionResult]]]) -> Optional[SentenceResult]:
        """
        Merge per-word results into one sentence result, reporting missing words.

        Same contract as :func:`sentencecheck.runtime.reconstruct.reconstruct`.
        """
        results = list(results) if results is not None else None
        sentence = reconstruct(segmentation, results)
        if sentence is not None:
            self._report(segmentation, results)
        return sentence

    def check_sentences(self, text_units: Sequence[TextUnit], evaluator: SpellingEvaluator,
                        suggestions_limit: int = DEFAULT_SUGGESTIONS_LIMIT) -> Tuple[SentenceResult, ...]:
        """
        Spell check whole sentences with a per-word evaluator.

        Args:
            text_units: Sentences to check
            evaluator: Per-word spelling evaluator
            suggestions_limit: Maximum suggestions per word

        Returns:
            Tuple[SentenceResult, ...]: One result per sentence, in input order, or
            the shared empty tuple when there are no sentences

        Raises:
            Exception: Whatever the evaluator raises, after logging it
        """
        if not text_units:
            return EMPTY_SENTENCE_RESULTS

        sentences = []
        for original in text_units:
            segmentation = self.split_words(original)
            if segmentation.size == 0:
                sentences.append(assemble(segmentation, ()))
                continue

            try:
                results = list(evaluator.evaluate(segmentation.word_units, suggestions_limit))
            except Exception as e:
                if self.log:
                    self.log.error("evaluation_failed", cookie=original.cookie, error=str(e))
                raise

            if not results:
                if self.log:
                    self.log.warn("no_word_results", cookie=original.cookie, words=segmentation.size)
                if self.meter:
                    self.meter.inc("sentencecheck.missing_results", segmentation.size, locale=self.locale)
                # Keep offsets aligned even when the evaluator reported nothing
                sentences.append(assemble(segmentation, ()))
                continue

            sentences.append(self.reconstruct(segmentation, results))

        return tuple(sentences)

    def _report(self, segmentation: SegmentationResult, results: Sequence[Optional[SuggestionResult]]) -> None:
        if not self.log and not self.meter:
            return

        by_sequence = index_by_sequence(results)
        matched = sum(1 for item in segmentation.items if item.text_unit.sequence in by_sequence)
        missing = segmentation.size - matched
        cookie = segmentation.original.cookie

        if self.meter:
            if missing:
                self.meter.inc("sentencecheck.missing_results", missing, locale=self.locale)
            if segmentation.size:
                self.meter.observe("sentencecheck.match_ratio", matched / segmentation.size,
                                   locale=self.locale)
        if self.log:
            if missing:
                self.log.warn("missing_word_results", cookie=cookie, missing=missing)
            self.log.info("sentence_reconstructed", cookie=cookie, words=segmentation.size,
                          matched=matched)
