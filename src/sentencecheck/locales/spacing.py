"""Resolution of a locale's word separators into an immutable configuration."""

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, List

from .loader import load_default_locales
from .schema import LocaleSpacing, LocaleTable
from .tags import fallback_chain, normalize_tag

CODE_PERIOD = ord(".")


@dataclass(frozen=True)
class SpacingAndPunctuations:
    """
    Word and sentence separators resolved for one locale.

    Only ``word_separators`` drives segmentation. ``sentence_separator`` and
    ``uses_whitespace`` describe the locale to hosts (for example to pick a
    sentence splitter or a word breaker for scripts written without spaces)
    and never change where words start or end.
    """
    locale: str
    word_separators: FrozenSet[int]      # codepoints
    sentence_separator: int = CODE_PERIOD
    uses_whitespace: bool = True

    def is_word_separator(self, code_point: int) -> bool:
        return code_point in self.word_separators

    def is_sentence_separator(self, code_point: int) -> bool:
        return code_point == self.sentence_separator


def _inheritance_chain(table: LocaleTable, locale: str) -> List[LocaleSpacing]:
    """Entries that apply to ``locale``, least specific first, excluding the default."""
    entry = None
    for candidate in fallback_chain(locale):
        entry = table.find(candidate)
        if entry is not None:
            break

    chain = []
    seen = set()
    while entry is not None and id(entry) not in seen:
        seen.add(id(entry))
        chain.append(entry)
        entry = table.find(entry.extends) if entry.extends else None
    chain.reverse()
    return chain


def resolve_spacing(locale: str, table: LocaleTable) -> SpacingAndPunctuations:
    """
    Resolve the spacing rules for an explicit locale.

    Looks up the most specific matching entry (``bn_BD`` then ``bn``), follows its
    ``extends`` chain and layers the result over the table default. Only the given
    tag and table are consulted; process-wide locale settings are never read.

    Args:
        locale: Locale tag such as ``en_US`` or ``bn-BD``
        table: Validated locale table

    Returns:
        SpacingAndPunctuations: Immutable configuration for the locale

    Raises:
        InvalidLocaleError: If the tag is malformed
    """
    tag = normalize_tag(locale)

    separators = set(table.default.word_separators or "")
    separators.update(table.default.extra_word_separators)
    sentence_separator = table.default.sentence_separator or "."
    uses_whitespace = table.default.uses_whitespace
    if uses_whitespace is None:
        uses_whitespace = True

    for entry in _inheritance_chain(table, tag):
        if entry.word_separators is not None:
            separators = set(entry.word_separators)
        separators.update(entry.extra_word_separators)
        if entry.sentence_separator is not None:
            sentence_separator = entry.sentence_separator
        if entry.uses_whitespace is not None:
            uses_whitespace = entry.uses_whitespace

    return SpacingAndPunctuations(
        locale=tag,
        word_separators=frozenset(ord(c) for c in separators),
        sentence_separator=ord(sentence_separator),
        uses_whitespace=uses_whitespace,
    )


@lru_cache(maxsize=64)
def get_spacing(locale: str) -> SpacingAndPunctuations:
    """Resolve ``locale`` against the bundled locale table, once per tag."""
    return resolve_spacing(locale, load_default_locales())
