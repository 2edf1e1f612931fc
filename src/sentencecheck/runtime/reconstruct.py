"""Reassembly of per-word evaluation results onto the original sentence."""

from typing import Dict, Iterable, Optional

import numpy as np

from ..core.types import EMPTY_SUGGESTIONS, SegmentationResult, SentenceResult, SuggestionResult


def index_by_sequence(results: Iterable[Optional[SuggestionResult]]) -> Dict[int, SuggestionResult]:
    """Map sequence -> result in delivery order; the first result per sequence wins."""
    by_sequence: Dict[int, SuggestionResult] = {}
    for result in results:
        if result is not None and result.sequence not in by_sequence:
            by_sequence[result.sequence] = result
    return by_sequence


def assemble(segmentation: SegmentationResult,
             results: Iterable[Optional[SuggestionResult]]) -> SentenceResult:
    """
    Build a SentenceResult for every word of ``segmentation``.

    Results are correlated by sequence only, never by position. Words without a
    result get EMPTY_SUGGESTIONS; unmatched and duplicate results are ignored.
    """
    original = segmentation.original
    by_sequence = index_by_sequence(results)

    query_size = segmentation.size
    offsets = np.zeros(query_size, dtype=np.int32)
    lengths = np.zeros(query_size, dtype=np.int32)
    suggestions = []
    for i, item in enumerate(segmentation.items):
        match = by_sequence.get(item.text_unit.sequence)
        if match is not None:
            # Address the word's result to the whole sentence
            match = match.with_cookie_and_sequence(original.cookie, original.sequence)
        offsets[i] = item.start
        lengths[i] = item.length
        suggestions.append(match if match is not None else EMPTY_SUGGESTIONS)

    return SentenceResult(
        suggestions=tuple(suggestions),
        offsets=offsets,
        lengths=lengths,
        cookie=original.cookie,
        sequence=original.sequence,
    )


def reconstruct(segmentation: Optional[SegmentationResult],
                results: Optional[Iterable[Optional[SuggestionResult]]]) -> Optional[SentenceResult]:
    """
    Merge per-word results into one sentence-aligned result.

    Args:
        segmentation: Output of the word segmenter for one sentence
        results: Evaluator output for the sentence's words, in any order, possibly
            incomplete or with duplicates

    Returns:
        Optional[SentenceResult]: None when there is nothing to reconstruct
        (no segmentation, or no results at all)
    """
    if results is None or segmentation is None:
        return None
    results = list(results)
    if not results:
        return None
    return assemble(segmentation, results)
