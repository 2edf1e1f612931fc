"""Value types passed between the segmenter, the evaluator and the reconstructor."""

import enum
from dataclasses import dataclass, field, replace
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class TextUnit:
    """One dispatchable unit of work: a sentence or a single word."""
    text: str
    cookie: int = 0      # shared by every unit derived from one request
    sequence: int = 0    # unique within one segmentation batch


@dataclass(frozen=True)
class WordSpan:
    """A word located in the original text, owning the TextUnit sent for evaluation."""
    start: int
    length: int
    text_unit: TextUnit

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"Word span start must be >= 0, got {self.start}")
        if self.length <= 0:
            raise ValueError(f"Word span length must be > 0, got {self.length}")
        if len(self.text_unit.text) != self.length:
            raise ValueError(
                f"Word span length {self.length} does not match text "
                f"{self.text_unit.text!r} of length {len(self.text_unit.text)}"
            )

    @classmethod
    def from_bounds(cls, text_unit: TextUnit, start: int, end: int) -> "WordSpan":
        """Build a span over [start, end)."""
        return cls(start=start, length=end - start, text_unit=text_unit)

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class SegmentationResult:
    """The whole-sentence TextUnit together with its words in text order."""
    original: TextUnit
    items: Tuple[WordSpan, ...] = ()

    def __post_init__(self):
        # Accept any iterable of spans but store a tuple
        object.__setattr__(self, "items", tuple(self.items))
        previous_end = 0
        for i, item in enumerate(self.items):
            if i > 0 and item.start < previous_end:
                raise ValueError(
                    f"Word spans must be ordered and non-overlapping: span {i} starts at "
                    f"{item.start} before previous end {previous_end}"
                )
            previous_end = item.end

    @property
    def size(self) -> int:
        """Number of word spans."""
        return len(self.items)

    @property
    def word_units(self) -> Tuple[TextUnit, ...]:
        """The per-word TextUnits in text order, ready for dispatch."""
        return tuple(item.text_unit for item in self.items)


class SuggestionAttributes(enum.IntFlag):
    """Flags describing a word's evaluation outcome."""
    NONE = 0
    IN_THE_DICTIONARY = 0x0001
    LOOKS_LIKE_TYPO = 0x0002
    HAS_RECOMMENDED_SUGGESTIONS = 0x0004


@dataclass(frozen=True)
class SuggestionResult:
    """Evaluator output for one TextUnit, addressed by its cookie and sequence."""
    attributes: SuggestionAttributes = SuggestionAttributes.NONE
    suggestions: Tuple[str, ...] = ()
    cookie: int = 0
    sequence: int = 0

    def __post_init__(self):
        object.__setattr__(self, "attributes", SuggestionAttributes(self.attributes))
        object.__setattr__(self, "suggestions", tuple(self.suggestions))

    def with_cookie_and_sequence(self, cookie: int, sequence: int) -> "SuggestionResult":
        """Return a copy addressed to a different cookie and sequence."""
        return replace(self, cookie=cookie, sequence=sequence)

    @property
    def suggestions_count(self) -> int:
        return len(self.suggestions)


# Shared "no suggestions" value for words the evaluator never reported on
EMPTY_SUGGESTIONS = SuggestionResult()


def _frozen_int_array(values) -> np.ndarray:
    array = np.array(values, dtype=np.int32).reshape(-1)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class SentenceResult:
    """Per-word results reassembled onto the original sentence."""
    suggestions: Tuple[SuggestionResult, ...]
    offsets: np.ndarray          # shape (N,) int32, read-only
    lengths: np.ndarray          # shape (N,) int32, read-only
    cookie: int = 0
    sequence: int = 0
    query_size: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "suggestions", tuple(self.suggestions))
        object.__setattr__(self, "offsets", _frozen_int_array(self.offsets))
        object.__setattr__(self, "lengths", _frozen_int_array(self.lengths))
        size = len(self.suggestions)
        if self.offsets.shape[0] != size or self.lengths.shape[0] != size:
            raise ValueError(
                f"Inconsistent sentence result sizes: suggestions={size}, "
                f"offsets={self.offsets.shape[0]}, lengths={self.lengths.shape[0]}"
            )
        object.__setattr__(self, "query_size", size)

    def __len__(self) -> int:
        return self.query_size

    def __iter__(self):
        """Iterate (offset, length, suggestion) triples in sentence order."""
        for i in range(self.query_size):
            yield int(self.offsets[i]), int(self.lengths[i]), self.suggestions[i]

    def __eq__(self, other):
        if not isinstance(other, SentenceResult):
            return NotImplemented
        return (
            self.cookie == other.cookie
            and self.sequence == other.sequence
            and self.suggestions == other.suggestions
            and np.array_equal(self.offsets, other.offsets)
            and np.array_equal(self.lengths, other.lengths)
        )

    __hash__ = None


# Returned whenever a batch of sentences has nothing to report
EMPTY_SENTENCE_RESULTS: Tuple[SentenceResult, ...] = ()


def get_empty_sentence_results() -> Tuple[SentenceResult, ...]:
    """Shared, immutable, empty batch result."""
    return EMPTY_SENTENCE_RESULTS
