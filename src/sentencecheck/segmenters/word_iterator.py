"""Locale-aware word boundary scanning."""

from typing import Optional

from ..locales.spacing import CODE_PERIOD, SpacingAndPunctuations


class ScanInvariantError(RuntimeError):
    """Raised when a boundary scan produces an index that violates its contract."""
    pass


class WordIterator:
    """
    Locates word starts and ends using a locale's word separators.

    Indexes are Python string indexes, which are whole codepoints, so a scan
    never lands inside a multi-unit character.
    """

    def __init__(self, spacing: SpacingAndPunctuations):
        """
        Initialize the iterator.

        Args:
            spacing: Resolved, immutable separator configuration
        """
        self.spacing = spacing

    def find_word_end(self, text: str, from_index: int) -> int:
        """
        Find the exclusive end of the word containing ``from_index``.

        Scanning starts just after ``from_index`` (at 0 when negative). A period
        only ends the word when the next codepoint is also a separator, so
        ``3.14`` and ``e.g`` stay whole. A ``from_index`` at or past the end of
        the text yields ``len(text)``.

        Returns:
            int: Index of the terminating separator, or ``len(text)``
        """
        length = len(text)
        index = 0 if from_index < 0 else min(from_index + 1, length)
        while index < length:
            code_point = ord(text[index])
            if self.spacing.is_word_separator(code_point):
                if code_point == CODE_PERIOD:
                    next_index = index + 1
                    if next_index < length and self.spacing.is_word_separator(ord(text[next_index])):
                        return index
                else:
                    return index
            index += 1
        return index

    def find_next_word_start(self, text: str, from_index: int) -> Optional[int]:
        """
        Find the first non-separator after ``from_index`` (at or after 0 when negative).

        Returns:
            Optional[int]: Index of the next word start, or None when there is none
        """
        length = len(text)
        if from_index >= length:
            return None
        index = 0 if from_index < 0 else from_index + 1
        while index < length:
            if not self.spacing.is_word_separator(ord(text[index])):
                return index
            index += 1
        return None
