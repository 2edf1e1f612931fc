"""Utility functions for examples and the command line."""

from ..core.abc import SpellingEvaluator


def create_evaluator_with_fallback(language: str = "en") -> SpellingEvaluator:
    """Create the best available evaluator, falling back to the mock evaluator."""

    # Try evaluators in priority order:
    # 1. pyspellchecker (word frequency dictionaries, optional install)
    # 2. Mock evaluator (small built-in word list)
    try:
        from sentencecheck.providers.pyspell_evaluator import create_pyspell_evaluator, is_pyspellchecker_available

        if is_pyspellchecker_available():
            evaluator = create_pyspell_evaluator(language)
            if evaluator is not None:
                print(f"✅ Using pyspellchecker dictionary for '{language}'")
                return evaluator
            print(f"⚠️  pyspellchecker has no dictionary for '{language}'")
        else:
            print("⚠️  pyspellchecker not installed")
    except Exception as setup_error:
        print(f"⚠️  pyspellchecker setup failed: {setup_error}")

    from sentencecheck.providers.mock_evaluator import create_mock_evaluator
    print("🔍 Falling back to mock evaluator...")
    print("   💡 For real dictionaries, install: pip install pyspellchecker")
    return create_mock_evaluator()


class SimpleConsoleLogger:
    """Simple console logger for examples."""

    def info(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"INFO: {msg} {details}" if details else f"INFO: {msg}")

    def warn(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"WARN: {msg} {details}" if details else f"WARN: {msg}")

    def error(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"ERROR: {msg} {details}" if details else f"ERROR: {msg}")
