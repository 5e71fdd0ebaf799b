# test_main.py
# CLI entry point: one-shot conversions, --sql, and the interactive prompt.

import pytest

import main as cli
from jalali_convert.logging_setup import resolve_level


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the CLI from reconfiguring the root logger under pytest."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def test_convert_value_both_directions():
    assert cli.convert_value("1403-01-01") == "2024-03-20 00:00:00"
    assert cli.convert_value("1403-01-01", end_of_day=True) == "2024-03-20 23:59:59"
    assert cli.convert_value("2024-03-20 10:00", to="jalali") == "1403-01-01 10:00:00"


def test_one_shot_to_gregorian(capsys):
    assert cli.main(["1403-01-01", "1400-01-01 10:30"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["2024-03-20 00:00:00", "2021-03-21 10:30:00"]


def test_one_shot_to_jalali(capsys):
    assert cli.main(["--to", "jalali", "2024-03-20"]) == 0
    assert capsys.readouterr().out.strip() == "1403-01-01"


def test_one_shot_reports_bad_values(capsys):
    assert cli.main(["1400/01/01", "1403-01-01"]) == 1
    captured = capsys.readouterr()
    assert "invalid Jalali date format" in captured.err
    assert captured.out.strip() == "2024-03-20 00:00:00"


def test_strict_flag(capsys):
    assert cli.main(["--strict", "1402-12-30"]) == 1
    assert "day out of range" in capsys.readouterr().err


def test_sql_flag(capsys):
    code = cli.main(["--db-url", "sqlite://", "--sql", "SELECT gregorian_to_jalali('2024-03-20') AS j"])
    assert code == 0
    assert "1403-01-01" in capsys.readouterr().out


def test_sql_flag_reports_failures(capsys):
    code = cli.main(["--db-url", "sqlite://", "--sql", "SELECT jalali_to_gregorian('bad', 0)"])
    assert code == 1
    assert "Query failed" in capsys.readouterr().err


def test_interactive_loop(monkeypatch, capsys):
    answers = iter(["1403-01-01", "1400/01/01", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "2024-03-20 00:00:00" in out
    assert "Failed to convert" in out


def test_interactive_loop_eof(monkeypatch, capsys):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert cli.main([]) == 0
    assert "Bye!" in capsys.readouterr().out


def test_unknown_log_level_is_reported(monkeypatch, capsys):
    monkeypatch.setenv("JALALI_LOG_LEVEL", "chatty")
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: resolve_level(kwargs["level"]))

    assert cli.main(["1403-01-01"]) == 2
    captured = capsys.readouterr()
    assert "unknown log level" in captured.err
    assert captured.out == ""
