"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from sentencecheck.locales.loader import load_locales_from_string
from sentencecheck.providers.mock_evaluator import create_mock_evaluator
from sentencecheck.runtime.sentence_adapter import SentenceLevelAdapter


@pytest.fixture
def mock_evaluator():
    """Provide a mock evaluator for testing."""
    return create_mock_evaluator()


@pytest.fixture
def sample_locales_yaml():
    """Provide a sample locale table YAML for testing."""
    return r"""
version: 1
default:
  word_separators: " \t\n.,;:!?"
  sentence_separator: "."
locales:
  en: {}
  bn:
    extra_word_separators: "।"
    sentence_separator: "।"
  as:
    extends: bn
  xx:
    word_separators: "-"
    uses_whitespace: false
"""


@pytest.fixture
def sample_locales(sample_locales_yaml):
    """Provide a loaded locale table for testing."""
    return load_locales_from_string(sample_locales_yaml)


@pytest.fixture
def temp_locales_file(sample_locales_yaml):
    """Provide a temporary locale file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(sample_locales_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures metrics."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()


@pytest.fixture
def en_adapter():
    """Provide an adapter for English using the bundled locale table."""
    return SentenceLevelAdapter("en")
