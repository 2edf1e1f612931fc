"""Protocol interfaces for collaborators injected by the host application."""

from typing import Protocol, Sequence, Any

from .types import SuggestionResult, TextUnit


class SpellingEvaluator(Protocol):
    """Host-provided spelling evaluator. Implement with pyspellchecker, Hunspell, a service, etc."""

    def evaluate(self, units: Sequence[TextUnit], suggestions_limit: int) -> Sequence[SuggestionResult]:
        """
        Evaluate a batch of single-word TextUnits.

        Args:
            units: Word units to evaluate
            suggestions_limit: Maximum number of suggestions per word

        Returns:
            Sequence[SuggestionResult]: Results carrying the cookie and sequence of the
            unit they answer. Order and completeness are not guaranteed.
        """
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...


class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
