"""Splits a sentence into word units ready for per-word evaluation."""

import itertools
from typing import List

from ..core.types import SegmentationResult, TextUnit, WordSpan
from .word_iterator import ScanInvariantError, WordIterator


class WordSegmenter:
    """
    Deterministic word segmenter driven by a WordIterator.

    Holds no per-request state; one instance may serve concurrent callers.
    """

    def __init__(self, iterator: WordIterator):
        self.iterator = iterator

    def segment(self, text: str, cookie: int, sequence: int = 0) -> SegmentationResult:
        """Split ``text`` into words addressed by ``cookie``."""
        return self.split_words(TextUnit(text=text, cookie=cookie, sequence=sequence))

    def split_words(self, original: TextUnit) -> SegmentationResult:
        """
        Split a sentence TextUnit into ordered, non-overlapping word spans.

        Each word gets its own TextUnit with the sentence's cookie and a sequence
        number unique within this call, starting at 0.

        Args:
            original: Whole-sentence unit

        Returns:
            SegmentationResult: The sentence and its words in text order

        Raises:
            ScanInvariantError: If the iterator returns an out-of-range or
                non-advancing index
        """
        text = original.text
        length = len(text)
        sequences = itertools.count()
        items: List[WordSpan] = []

        cursor = -1
        while cursor <= length:
            word_start = self.iterator.find_next_word_start(text, cursor)
            if word_start is None:
                break
            if not cursor < word_start < length:
                raise ScanInvariantError(
                    f"Word start {word_start} out of range after cursor {cursor} (length {length})"
                )
            word_end = self.iterator.find_word_end(text, word_start)
            if not word_start <= word_end <= length:
                raise ScanInvariantError(
                    f"Word end {word_end} out of range for start {word_start} (length {length})"
                )

            if word_end > word_start:
                unit = TextUnit(text=text[word_start:word_end], cookie=original.cookie,
                                sequence=next(sequences))
                items.append(WordSpan.from_bounds(unit, word_start, word_end))
            cursor = word_end

        return SegmentationResult(original=original, items=tuple(items))
