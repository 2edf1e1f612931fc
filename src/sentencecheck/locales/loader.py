"""YAML locale table loading and validation."""

import yaml
from functools import lru_cache
from pathlib import Path
from typing import Union
from .schema import LocaleTable

DEFAULT_LOCALES_PATH = Path(__file__).parent / "locales.yaml"


class LocaleLoadError(Exception):
    """Exception raised when locale table loading or validation fails."""
    pass


def _validate_table(data, source: str) -> LocaleTable:
    if not isinstance(data, dict):
        raise LocaleLoadError(f"{source} must contain a YAML mapping, got {type(data)}")

    try:
        table = LocaleTable.model_validate(data)
    except Exception as e:
        raise LocaleLoadError(f"Locale table validation failed: {e}") from e

    # Run additional validation
    issues = table.validate_locales()
    if issues:
        raise LocaleLoadError(f"Locale table validation issues: {'; '.join(issues)}")

    return table


def load_locales(path: Union[str, Path]) -> LocaleTable:
    """
    Load and validate a locale table from YAML file.

    Args:
        path: Path to YAML locale file

    Returns:
        LocaleTable: Validated locale table

    Raises:
        LocaleLoadError: If file cannot be read or table is invalid
    """
    path = Path(path)

    if not path.exists():
        raise LocaleLoadError(f"Locale file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LocaleLoadError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise LocaleLoadError(f"Cannot read locale file {path}: {e}") from e

    return _validate_table(data, f"Locale file {path}")


def load_locales_from_string(yaml_content: str) -> LocaleTable:
    """
    Load and validate a locale table from YAML string.

    Raises:
        LocaleLoadError: If YAML is invalid or table validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise LocaleLoadError(f"Invalid YAML content: {e}") from e

    return _validate_table(data, "Locale content")


@lru_cache(maxsize=1)
def load_default_locales() -> LocaleTable:
    """Load the locale table bundled with the package."""
    return load_locales(DEFAULT_LOCALES_PATH)
