"""
Tests for the tigo command-line interface.
"""
from unittest.mock import patch

import pytest

from tigo.cli import main


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from replacing the root handlers during tests."""
    with patch('tigo.cli.setup_logging') as mock_setup:
        yield mock_setup


class TestWordCommand:

    def test_stems_words(self, capsys):
        assert main(["word", "birdojn", "kantis", "la"]) == 0
        assert capsys.readouterr().out.splitlines() == ["bird", "kant", "la"]

    def test_explain(self, capsys):
        assert main(["word", "birdojn", "--explain"]) == 0
        out = capsys.readouterr().out
        assert "birdojn -> bird" in out
        assert "rule=suffix" in out
        assert "suffix=-o" in out
        assert "plural/accusative=2" in out

    def test_variant_option(self, capsys):
        assert main(["--variant", "basic", "word", "kantas"]) == 0
        assert capsys.readouterr().out.strip() == "kantas"

    def test_min_stem_length_option(self, capsys):
        assert main(["--min-stem-length", "5", "word", "birdo"]) == 0
        assert capsys.readouterr().out.strip() == "birdo"


class TestTextCommand:

    def test_argument(self, capsys):
        assert main(["text", "La birdoj kantas."]) == 0
        assert capsys.readouterr().out == "La bird kant.\n"

    def test_stdin(self, capsys, monkeypatch):
        import io
        monkeypatch.setattr('sys.stdin', io.StringIO("Hundoj bojas.\nKatoj ne.\n"))
        assert main(["text"]) == 0
        assert capsys.readouterr().out == "Hund boj.\nKat ne.\n"

    def test_empty_argument_does_not_read_stdin(self, capsys, monkeypatch):
        import io
        monkeypatch.setattr('sys.stdin', io.StringIO("birdoj\n"))
        assert main(["text", ""]) == 0
        assert capsys.readouterr().out == "\n"

    def test_file_option(self, capsys, tmp_path):
        source = tmp_path / "in.txt"
        source.write_text("nord-ameriko\n", encoding='utf-8')
        assert main(["--no-hyphens", "text", "-f", str(source)]) == 0
        assert capsys.readouterr().out == "nord-amerik\n"

    def test_missing_file(self, capsys, tmp_path):
        assert main(["text", "-f", str(tmp_path / "missing.txt")]) == 1
        assert "ERROR" in capsys.readouterr().err


class TestFileCommand:

    def test_stem_file(self, capsys, tmp_path):
        source = tmp_path / "libro.txt"
        target = tmp_path / "libro.stem.txt"
        source.write_text("La birdoj kantas.\nMi amas vin.\n", encoding='utf-8')

        assert main(["file", str(source), str(target), "--no-progress", "-v"]) == 0

        assert target.read_text(encoding='utf-8') == "La bird kant.\nMi am vi.\n"
        out = capsys.readouterr().out
        assert "Lines: 2" in out
        assert "Stemming complete." in out

    def test_workers(self, tmp_path):
        source = tmp_path / "libro.txt"
        target = tmp_path / "out.txt"
        source.write_text("birdo\n" * 20, encoding='utf-8')

        assert main(["file", str(source), str(target), "--workers", "3", "--no-progress"]) == 0
        assert target.read_text(encoding='utf-8') == "bird\n" * 20

    def test_with_progress_bar(self, capsys, tmp_path):
        source = tmp_path / "libro.txt"
        source.write_text("birdo\n", encoding='utf-8')

        assert main(["file", str(source), str(tmp_path / "out.txt")]) == 0
        assert "Stemming complete." in capsys.readouterr().out

    def test_missing_input(self, capsys, tmp_path):
        code = main(["file", str(tmp_path / "missing.txt"), str(tmp_path / "out.txt"), "--no-progress"])
        assert code == 1
        assert "File not found" in capsys.readouterr().err

    def test_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["file", "only-one-argument"])
        assert exc.value.code == 2


class TestInfoAndGlobals:

    def test_info(self, capsys):
        assert main(["--variant", "basic", "info", "--suffixes"]) == 0
        out = capsys.readouterr().out
        assert "Rule variant: basic" in out
        assert "Suffixes: 10 (longest: 3)" in out
        assert "Roman numerals: 0" in out
        assert "  ajn" in out

    def test_env_variant(self, capsys, monkeypatch):
        monkeypatch.setenv("TIGO_RULE_VARIANT", "verbal")
        assert main(["info"]) == 0
        assert "Rule variant: verbal" in capsys.readouterr().out

    def test_cli_overrides_env(self, capsys, monkeypatch):
        monkeypatch.setenv("TIGO_RULE_VARIANT", "verbal")
        assert main(["--variant", "full", "info"]) == 0
        assert "Rule variant: full" in capsys.readouterr().out

    def test_bad_env_is_usage_error(self, monkeypatch):
        monkeypatch.setenv("TIGO_RULE_VARIANT", "bogus")
        with pytest.raises(SystemExit) as exc:
            main(["info"])
        assert exc.value.code == 2

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_debug_flag_passed_to_logging(self, no_logging_setup):
        main(["--debug", "word", "birdo"])
        assert no_logging_setup.call_args.kwargs["debug"] is True
