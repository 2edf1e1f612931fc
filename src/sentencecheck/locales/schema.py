"""Pydantic schemas for YAML locale table validation."""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from .tags import InvalidLocaleError, normalize_tag


class LocaleSpacing(BaseModel):
    """Spacing and punctuation rules for one locale. Unset fields are inherited."""
    word_separators: Optional[str] = Field(default=None,
                                           description="Every character is a word separator (replaces inherited set)")
    extra_word_separators: str = Field(default="",
                                       description="Characters added to the inherited separator set")
    sentence_separator: Optional[str] = Field(default=None,
                                              description="Single character that ends a sentence")
    uses_whitespace: Optional[bool] = Field(default=None,
                                            description="Whether the script puts spaces between words")
    extends: Optional[str] = Field(default=None, description="Locale tag to inherit rules from")

    class Config:
        extra = "forbid"  # Strict validation


class LocaleTable(BaseModel):
    """Complete locale table: defaults plus per-locale overrides."""
    version: int = Field(default=1, description="Locale table schema version")
    default: LocaleSpacing = Field(description="Rules used when no locale entry matches")
    locales: Dict[str, LocaleSpacing] = Field(default_factory=dict,
                                              description="Per-locale overrides keyed by tag")

    class Config:
        extra = "forbid"  # Strict validation

    def validate_locales(self) -> List[str]:
        """Validate locale configuration and return any issues."""
        issues = []

        if not self.default.word_separators:
            issues.append("Default locale has no word_separators")
        if self.default.extends:
            issues.append("Default locale cannot extend another locale")

        # Check for tags that are malformed or collide once normalized
        normalized = {}
        invalid_before = len(issues)
        for tag in self.locales:
            try:
                key = normalize_tag(tag)
            except InvalidLocaleError as e:
                issues.append(str(e))
                continue
            normalized.setdefault(key, []).append(tag)
        if len(issues) > invalid_before:
            # Lookups below normalize every tag
            return issues
        duplicates = sorted(key for key, tags in normalized.items() if len(tags) > 1)
        if duplicates:
            issues.append(f"Duplicate locale tags: {duplicates}")

        entries = dict(self.locales)
        entries["default"] = self.default
        for tag, spacing in entries.items():
            if spacing.sentence_separator is not None and len(spacing.sentence_separator) != 1:
                issues.append(
                    f"Locale '{tag}' sentence_separator must be one character, "
                    f"got {spacing.sentence_separator!r}"
                )

        # Validate that extends targets exist and do not loop
        for tag, spacing in self.locales.items():
            seen = [tag]
            target = spacing.extends
            while target is not None:
                try:
                    entry = self.find(target)
                except InvalidLocaleError as e:
                    issues.append(f"Locale '{seen[-1]}' extends invalid tag: {e}")
                    break
                if entry is None:
                    issues.append(f"Locale '{seen[-1]}' extends unknown locale '{target}'")
                    break
                if normalize_tag(target) in {normalize_tag(t) for t in seen}:
                    issues.append(f"Locale '{tag}' has cyclic extends: {' -> '.join(seen + [target])}")
                    break
                seen.append(target)
                target = entry.extends

        return issues

    def find(self, tag: str) -> Optional[LocaleSpacing]:
        """Look up a locale entry by tag, ignoring case and '-'/'_' differences."""
        key = normalize_tag(tag)
        for name, spacing in self.locales.items():
            if normalize_tag(name) == key:
                return spacing
        return None
