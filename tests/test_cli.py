"""Test the command-line interface."""

import json

from sentencecheck.cli import create_parser, main
from sentencecheck.locales.loader import DEFAULT_LOCALES_PATH


class TestCli:
    """Test CLI commands and exit codes."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_validate_bundled_table(self, capsys):
        """Test validating the bundled locale table."""
        assert main(["validate", str(DEFAULT_LOCALES_PATH), "-v"]) == 0

        out = capsys.readouterr().out
        assert "validation successful" in out
        assert "bn:" in out

    def test_validate_missing_file(self, capsys):
        assert main(["validate", "/does/not/exist.yaml"]) == 1
        assert "not found" in capsys.readouterr().out

    def test_validate_invalid_file(self, tmp_path, capsys):
        bad = tmp_path / "bad.yaml"
        bad.write_text("default:\n  sentence_separator: '.'\n", encoding="utf-8")

        assert main(["validate", str(bad)]) == 1
        assert "validation failed" in capsys.readouterr().out

    def test_split_json(self, capsys):
        """Test splitting text to JSON."""
        assert main(["split", "--json", "Mr. Smith has 3.14"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [w["word"] for w in data["words"]] == ["Mr", "Smith", "has", "3.14"]
        assert data["words"][1]["start"] == 4

    def test_split_with_custom_locales(self, temp_locales_file, capsys):
        assert main(["split", "--locales", str(temp_locales_file), "-l", "xx", "a b-c"]) == 0

        out = capsys.readouterr().out
        assert "2 words" in out

    def test_split_invalid_locale(self, capsys):
        assert main(["split", "-l", "not a tag", "text"]) == 1
        assert "Invalid locale tag" in capsys.readouterr().out

    def test_check_with_mock_evaluator(self, capsys):
        """Test spell checking with the mock evaluator."""
        assert main(["check", "--mock-evaluator", "--json", "Teh fox"]) == 0

        out = capsys.readouterr().out
        data = json.loads(out[out.index("["):])
        words = data[0]["words"]
        assert [w["word"] for w in words] == ["Teh", "fox"]
        assert "LOOKS_LIKE_TYPO" in words[0]["attributes"]
        assert words[1]["attributes"] == ["IN_THE_DICTIONARY"]

    def test_check_text_output(self, capsys):
        assert main(["check", "--mock-evaluator", "-v", "Teh fox"]) == 0

        out = capsys.readouterr().out
        assert "Teh @0" in out
        assert "INFO: sentence_reconstructed" in out

    def test_info(self, capsys):
        assert main(["info"]) == 0
        assert "Bundled locales" in capsys.readouterr().out

    def test_parser_defaults(self):
        args = create_parser().parse_args(["check"])

        assert args.locale == "en"
        assert args.limit == 5
        assert args.text == []
