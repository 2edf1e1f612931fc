"""
Example 1: Sentence checking with an injected evaluator

Shows how a host splits sentences, dispatches the words to its own
evaluator, and gets results aligned with the original text back.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from sentencecheck.core.types import SuggestionAttributes, TextUnit
from sentencecheck.examples.utils import SimpleConsoleLogger, create_evaluator_with_fallback
from sentencecheck.runtime.sentence_adapter import SentenceLevelAdapter


def main():
    print("🔤 sentencecheck Minimal Example")
    print("=" * 40)

    evaluator = create_evaluator_with_fallback("en")
    adapter = SentenceLevelAdapter("en_US", logger=SimpleConsoleLogger())

    sentences = [
        "Mr. Smith paid 3.14 dolars for teh book.",
        "Evry word is checkd on its own, then put back.",
    ]
    units = [TextUnit(text=text, cookie=i) for i, text in enumerate(sentences)]

    for unit, result in zip(units, adapter.check_sentences(units, evaluator)):
        print(f"\n{unit.text}")
        for offset, length, suggestion in result:
            if SuggestionAttributes.LOOKS_LIKE_TYPO in suggestion.attributes:
                word = unit.text[offset:offset + length]
                print(f"   {' ' * offset}{'^' * length}  {word} -> {', '.join(suggestion.suggestions) or '?'}")


if __name__ == "__main__":
    main()
