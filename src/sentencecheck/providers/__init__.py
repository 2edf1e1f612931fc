"""
sentencecheck Providers Package

This package contains spelling evaluators that implement the SpellingEvaluator
protocol. All providers are injected by the host rather than imported by the
adapter.
"""

from .mock_evaluator import MockEvaluator, create_mock_evaluator
from .pyspell_evaluator import PySpellEvaluator, create_pyspell_evaluator, is_pyspellchecker_available

__all__ = [
    'MockEvaluator', 'create_mock_evaluator',
    'PySpellEvaluator', 'create_pyspell_evaluator', 'is_pyspellchecker_available',
]
