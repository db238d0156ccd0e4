"""Tests for the command line entry point."""
import sys
import os
import io
import json
from unittest.mock import patch
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from letterpool import main as main_mod
from letterpool.suggest import SuggestionEngine


def test_run_solve_prints_ranked_words():
    engine = SuggestionEngine(["cat", "dogs", "ox", "a", "zzz"])
    out = io.StringIO()
    result = main_mod.run_solve(engine, "catdogsoxa", out=out)
    assert result == ("dogs", "cat", "ox", "a")
    assert out.getvalue().splitlines() == ["0: dogs", "1: cat", "2: ox", "3: a"]


def test_run_solve_subtracts_used():
    engine = SuggestionEngine(["silent", "tin", "lie"])
    out = io.StringIO()
    assert main_mod.run_solve(engine, "silent", used="tn", out=out) == ("lie",)


def test_parser_defaults():
    args = main_mod.build_parser().parse_args([])
    assert args.dictionary is None
    assert args.builtin is None
    assert args.solve is None
    assert args.used == ""
    args = main_mod.build_parser().parse_args(["--builtin"])
    assert args.builtin == ""


def test_main_solve_with_word_file(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("ten\nnet\nsent\n")
    with patch('letterpool.config.CONFIG_FILE', tmp_path / "config.json"):
        code = main_mod.main(["--dictionary", str(words), "--solve", "tens"])
    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["0: sent", "1: ten", "2: net"]


def test_main_uses_config_dictionary(tmp_path, capsys):
    words = tmp_path / "mine.txt"
    words.write_text("ox\n")
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"dictionary_path": str(words)}))
    with patch('letterpool.config.CONFIG_FILE', config):
        code = main_mod.main(["--solve", "xo"])
    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["0: ox"]


def test_main_missing_dictionary_is_fatal(tmp_path):
    with patch('letterpool.config.CONFIG_FILE', tmp_path / "config.json"), \
            patch.object(main_mod, 'run_gui') as run_gui:
        code = main_mod.main(["--dictionary", str(tmp_path / "missing.txt")])
    assert code == 1
    run_gui.assert_not_called()


def test_builtin_language_from_config(tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"builtin_language": "de"}))
    with patch('letterpool.config.CONFIG_FILE', config), \
            patch.object(main_mod, 'load_builtin_words', return_value=("ox", "zoo")) as load:
        code = main_mod.main(["--builtin", "--solve", "ox"])
    assert code == 0
    load.assert_called_once_with("de")
    assert capsys.readouterr().out.splitlines() == ["0: ox"]


def test_builtin_language_flag_overrides_config(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"builtin_language": "de"}))
    with patch('letterpool.config.CONFIG_FILE', config), \
            patch.object(main_mod, 'load_builtin_words', return_value=()) as load:
        main_mod.main(["--builtin", "fr", "--solve", "ox"])
    load.assert_called_once_with("fr")


def test_first_run_writes_default_config(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("ox\n")
    config = tmp_path / "cfg" / "config.json"
    with patch('letterpool.config.CONFIG_FILE', config):
        main_mod.main(["--dictionary", str(words), "--solve", "ox"])
    stored = json.loads(config.read_text(encoding="utf-8"))
    assert stored["dictionary_path"] == "words.txt"
    assert stored["builtin_language"] == "en"


if __name__ == '__main__':
    import pytest
    sys.exit(pytest.main([__file__]))
