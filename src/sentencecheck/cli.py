"""Command-line interface for sentencecheck."""

import argparse
import sys
from pathlib import Path

from sentencecheck.core.types import SuggestionAttributes, TextUnit
from sentencecheck.core.util import safe_json, sentence_result_to_dict
from sentencecheck.locales.loader import LocaleLoadError, load_default_locales, load_locales
from sentencecheck.locales.spacing import resolve_spacing
from sentencecheck.locales.tags import InvalidLocaleError
from sentencecheck.providers.mock_evaluator import create_mock_evaluator
from sentencecheck.runtime.sentence_adapter import DEFAULT_SUGGESTIONS_LIMIT, SentenceLevelAdapter

DEFAULT_SENTENCES = [
    "Mr. Smith has 3.14 reasons to chek his speling.",
    "The quikc brown fox jumps over the lazy dog.",
    "Hello, world!",
]


def _visible(text: str) -> str:
    """Escape whitespace and control characters for display."""
    return "".join(ch if ch.isprintable() and not ch.isspace() or ch == " " else repr(ch)[1:-1]
                   for ch in text)


def _load_table(args):
    if getattr(args, "locales", None):
        return load_locales(Path(args.locales))
    return load_default_locales()


def _build_adapter(args, logger=None):
    table = _load_table(args)
    return SentenceLevelAdapter(args.locale, table=table, logger=logger)


def validate_locales_command(args):
    """Validate a locale table file."""
    try:
        locales_path = Path(args.locales_file)
        if not locales_path.exists():
            print(f"Error: Locale file not found: {locales_path}")
            return 1

        print(f"Validating locale table: {locales_path}")
        table = load_locales(locales_path)

        print("✅ Locale table validation successful!")
        print(f"   Version: {table.version}")
        print(f"   Locales: {len(table.locales)}")

        if args.verbose:
            print("\nLocales:")
            for tag in ["default", *table.locales]:
                spacing = resolve_spacing("und" if tag == "default" else tag, table)
                separators = "".join(sorted(chr(c) for c in spacing.word_separators))
                print(f"   {tag}: separators=\"{_visible(separators)}\" "
                      f"sentence={chr(spacing.sentence_separator)} "
                      f"whitespace={spacing.uses_whitespace}")

        return 0

    except LocaleLoadError as e:
        print(f"❌ Locale table validation failed: {e}")
        return 1
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        return 1


def split_command(args):
    """Show how text is split into words."""
    try:
        adapter = _build_adapter(args)
        sentences = args.text or DEFAULT_SENTENCES

        for cookie, text in enumerate(sentences):
            segmentation = adapter.segment(text, cookie)
            if args.json:
                print(safe_json({
                    "text": text,
                    "cookie": cookie,
                    "words": [{"start": item.start, "length": item.length,
                               "sequence": item.text_unit.sequence, "word": item.text_unit.text}
                              for item in segmentation.items],
                }))
                continue

            print(f"\nText: \"{text}\" ({segmentation.size} words, locale {adapter.locale})")
            for item in segmentation.items:
                print(f"   [{item.start:>3}, {item.end:>3})  #{item.text_unit.sequence}  {item.text_unit.text}")

        return 0

    except (LocaleLoadError, InvalidLocaleError) as e:
        print(f"❌ {e}")
        return 1
    except Exception as e:
        print(f"❌ Error: {e}")
        return 1


def check_command(args):
    """Spell check sentences word by word."""
    try:
        logger = None
        if args.verbose:
            from sentencecheck.examples.utils import SimpleConsoleLogger
            logger = SimpleConsoleLogger()
        adapter = _build_adapter(args, logger=logger)

        if args.mock_evaluator:
            print("Using mock evaluator")
            evaluator = create_mock_evaluator()
        else:
            from sentencecheck.examples.utils import create_evaluator_with_fallback
            evaluator = create_evaluator_with_fallback(adapter.locale.split("_")[0])

        sentences = args.text or DEFAULT_SENTENCES
        units = [TextUnit(text=text, cookie=cookie) for cookie, text in enumerate(sentences)]
        results = adapter.check_sentences(units, evaluator, suggestions_limit=args.limit)

        if args.json:
            print(safe_json([sentence_result_to_dict(result, unit.text)
                             for unit, result in zip(units, results)]))
            return 0

        print("\n🔎 Spelling:")
        for unit, result in zip(units, results):
            print(f"\nText: \"{unit.text}\"")
            for offset, length, suggestion in result:
                word = unit.text[offset:offset + length]
                if SuggestionAttributes.LOOKS_LIKE_TYPO in suggestion.attributes:
                    hint = ", ".join(suggestion.suggestions) or "no suggestions"
                    print(f"   ⚠️  {word} @{offset} -> {hint}")
                elif SuggestionAttributes.IN_THE_DICTIONARY in suggestion.attributes:
                    print(f"   ✅ {word} @{offset}")
                else:
                    print(f"   ❔ {word} @{offset} (no result)")

        return 0

    except (LocaleLoadError, InvalidLocaleError) as e:
        print(f"❌ {e}")
        return 1
    except Exception as e:
        print(f"❌ Error: {e}")
        return 1


def info_command(args):
    """Display sentencecheck version and system information."""
    print("sentencecheck CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("sentencecheck")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    table = load_default_locales()
    print(f"Bundled locales: {', '.join(table.locales) or 'none'}")

    # Check for optional dependencies
    print("\nOptional dependencies:")

    try:
        import spellchecker
        print(f"   ✅ pyspellchecker: {getattr(spellchecker, '__version__', 'installed')}")
    except ImportError:
        print("   ❌ pyspellchecker: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sentencecheck",
        description="Sentence level spell checking with per-word evaluators"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a locale table file"
    )
    validate_parser.add_argument(
        "locales_file",
        help="Path to the locale YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show resolved separators per locale"
    )

    # Split and check share text and locale options
    for name, help_text in (("split", "Show how text is split into words"),
                            ("check", "Spell check sentences word by word")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "text",
            nargs="*",
            help="Sentences to process (default: built-in examples)"
        )
        sub.add_argument(
            "-l", "--locale",
            default="en",
            help="Locale tag, e.g. en_US or bn-BD (default: en)"
        )
        sub.add_argument(
            "--locales",
            help="Custom locale YAML file (default: bundled table)"
        )
        sub.add_argument(
            "--json",
            action="store_true",
            help="Print JSON instead of text"
        )

    check_parser = subparsers.choices["check"]
    check_parser.add_argument(
        "-n", "--limit",
        type=int,
        default=DEFAULT_SUGGESTIONS_LIMIT,
        help=f"Maximum suggestions per word (default: {DEFAULT_SUGGESTIONS_LIMIT})"
    )
    check_parser.add_argument(
        "--mock-evaluator",
        action="store_true",
        help="Force use of mock evaluator"
    )
    check_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log segmentation and reconstruction events"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "validate":
        return validate_locales_command(args)
    elif args.command == "split":
        return split_command(args)
    elif args.command == "check":
        return check_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
