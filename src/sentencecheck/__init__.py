"""
sentencecheck - Sentence level spell checking on top of per-word evaluators.

Splits sentences into words with locale-aware boundary rules, hands the words
to a host-provided spelling evaluator, and reassembles the per-word results
onto the original sentence offsets.
"""

from .core.types import (
    EMPTY_SENTENCE_RESULTS,
    EMPTY_SUGGESTIONS,
    SegmentationResult,
    SentenceResult,
    SuggestionAttributes,
    SuggestionResult,
    TextUnit,
    WordSpan,
    get_empty_sentence_results,
)
from .runtime.reconstruct import reconstruct
from .runtime.sentence_adapter import SentenceLevelAdapter

__version__ = "0.1.0"
__all__ = [
    "EMPTY_SENTENCE_RESULTS", "EMPTY_SUGGESTIONS", "SegmentationResult", "SentenceLevelAdapter",
    "SentenceResult", "SuggestionAttributes", "SuggestionResult", "TextUnit", "WordSpan",
    "get_empty_sentence_results", "reconstruct",
]
