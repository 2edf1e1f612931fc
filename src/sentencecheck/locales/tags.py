"""Locale tag normalization."""

import re
from typing import List

_TAG_PATTERN = re.compile(r"^[A-Za-z0-9]+(?:[-_][A-Za-z0-9]+)*$")


class InvalidLocaleError(ValueError):
    """Raised when a locale tag is empty or malformed."""
    pass


def normalize_tag(locale: str) -> str:
    """
    Normalize a locale tag to ``language[_Script][_REGION]`` form.

    ``bn-BD``, ``bn_bd`` and ``BN_BD`` all become ``bn_BD``; ``sr-latn-rs``
    becomes ``sr_Latn_RS``.

    Raises:
        InvalidLocaleError: If the tag is empty or contains other characters
    """
    if not isinstance(locale, str) or not _TAG_PATTERN.match(locale):
        raise InvalidLocaleError(f"Invalid locale tag: {locale!r}")

    parts = re.split(r"[-_]", locale)
    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        elif len(part) == 2 or part.isdigit():
            normalized.append(part.upper())
        else:
            normalized.append(part.lower())
    return "_".join(normalized)


def fallback_chain(locale: str) -> List[str]:
    """Candidate tags from most to least specific: ``sr_Latn_RS, sr_Latn, sr``."""
    parts = normalize_tag(locale).split("_")
    return ["_".join(parts[:i]) for i in range(len(parts), 0, -1)]
