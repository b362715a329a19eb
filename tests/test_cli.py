"""
Tests for the plurality command line tool (plurality/cli_main.py and handlers).
"""

import argparse
from unittest.mock import patch

import pytest

from plurality.cli import PluralityCLI
from plurality.cli_main import main
from plurality.registry import PluralityRegistry, get_registry
from plurality.rules import PluralRule


def _lines(capsys) -> list[list[str]]:
    return [line.split() for line in capsys.readouterr().out.strip().splitlines()]


class TestParser:
    def test_subcommands(self):
        parser = PluralityCLI.create_parser()
        args = parser.parse_args(["suffix", "ru", "1", "2"])
        assert args.command == "suffix"
        assert args.language == "ru"
        assert args.counts == [1, 2]

    def test_table_defaults(self):
        args = PluralityCLI.create_parser().parse_args(["table"])
        assert args.language is None
        assert args.start == 0
        assert args.stop == 30

    def test_uses_process_registry(self):
        assert PluralityCLI().registry is get_registry()

    def test_dispatch_unknown_command(self):
        with pytest.raises(ValueError):
            PluralityCLI().dispatch(argparse.Namespace(command="nope"))


class TestSuffixCommand:
    def test_cyrillic(self, capsys):
        assert main(["suffix", "ru", "1", "2", "5", "11", "21"]) == 0
        assert _lines(capsys) == [
            ["1", "_one"],
            ["2", "_few"],
            ["5", "_many"],
            ["11", "_many"],
            ["21", "_one"],
        ]

    def test_unknown_language(self, capsys):
        assert main(["suffix", "xx-unknown", "0", "1"]) == 0
        assert _lines(capsys) == [["0", "_other"], ["1", "_one"]]

    def test_negative_count_normalized(self, capsys):
        assert main(["suffix", "fr", "-3"]) == 0
        assert _lines(capsys) == [["3", "_other"]]

    def test_verbose_shows_rule(self, capsys):
        assert main(["--verbose", "suffix", "pl-PL", "22"]) == 0
        assert "(polish)" in capsys.readouterr().out


class TestKeyCommand:
    def test_key(self, capsys):
        assert main(["key", "STR_ITEMS", "ru", "3"]) == 0
        assert capsys.readouterr().out.strip() == "STR_ITEMS_few"

    def test_key_with_brackets(self, capsys):
        assert main(["key", "[b]ITEMS", "en", "1"]) == 0
        assert capsys.readouterr().out.strip() == "[b]ITEMS_one"


class TestTableCommand:
    def test_table(self, capsys):
        assert main(["table", "ro", "--start", "18", "--stop", "21"]) == 0
        out = capsys.readouterr().out
        assert "ro (romanian)" in out
        assert "_few" in out
        assert "_other" in out

    def test_table_default_language(self, capsys, monkeypatch):
        monkeypatch.setenv("PLURALITY_LANGUAGE", "cs-CZ")
        assert main(["table", "--stop", "3"]) == 0
        assert "cs-CZ (czech)" in capsys.readouterr().out

    def test_invalid_range(self, capsys):
        assert main(["table", "ru", "--start", "5", "--stop", "2"]) == 1
        assert "Invalid range" in capsys.readouterr().out

    def test_negative_start(self, capsys):
        assert main(["table", "ru", "--start=-1"]) == 1


class TestRulesCommand:
    def test_lists_languages(self, capsys):
        assert main(["rules"]) == 0
        out = capsys.readouterr().out
        for language in ("fr", "hu-HU", "tr-TR", "cs-CZ", "pl-PL", "ro", "ru", "uk"):
            assert language in out
        assert "zero_one_singular" in out
        assert "one_singular" in out


class TestRulesFile:
    def test_rules_file_flag(self, capsys, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("rules:\n  sk-SK: czech\n", encoding="utf-8")

        assert main(["--rules-file", str(path), "suffix", "sk-SK", "3"]) == 0
        assert _lines(capsys) == [["3", "_few"]]

    def test_rules_file_flag_expands_home(self, capsys, monkeypatch, tmp_path):
        (tmp_path / "rules.yaml").write_text("sk-SK: czech\n", encoding="utf-8")
        monkeypatch.setenv("HOME", str(tmp_path))

        assert main(["--rules-file", "~/rules.yaml", "suffix", "sk-SK", "2"]) == 0
        assert _lines(capsys) == [["2", "_few"]]

    def test_rules_file_env(self, capsys, monkeypatch, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("be: cyrillic\n", encoding="utf-8")
        monkeypatch.setenv("PLURALITY_RULES_FILE", str(path))

        assert main(["suffix", "be", "12"]) == 0
        assert _lines(capsys) == [["12", "_many"]]

    def test_overrides_stay_out_of_process_registry(self, capsys, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("sk-SK: czech\n", encoding="utf-8")

        assert main(["--rules-file", str(path), "suffix", "sk-SK", "3"]) == 0
        assert not get_registry().supports_language("sk-SK")

    def test_bad_rules_file(self, capsys, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("xx: klingon\n", encoding="utf-8")

        assert main(["--rules-file", str(path), "rules"]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_rules_file(self, capsys, tmp_path):
        assert main(["--rules-file", str(tmp_path / "nope.yaml"), "rules"]) == 1


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "plurality 0.1.0" in capsys.readouterr().out

    def test_keyboard_interrupt(self, capsys):
        with patch.object(PluralityCLI, "rules", side_effect=KeyboardInterrupt):
            assert main(["rules"]) == 130

    def test_custom_registry_handlers(self, capsys):
        cli = PluralityCLI(registry=PluralityRegistry({"ja": PluralRule.NO_SINGULAR}))
        args = cli.create_parser().parse_args(["suffix", "ja", "1"])
        assert cli.dispatch(args) == 0
        assert _lines(capsys) == [["1", "_other"]]
