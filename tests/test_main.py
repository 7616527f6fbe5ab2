"""Tests for the command-line interface."""

import sys

import pytest

import main


def _run(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["main.py", *args])
    main.main()


def test_query_prints_results_table(monkeypatch, capsys):
    _run(monkeypatch, "--query", "привет")
    out = capsys.readouterr().out
    assert "=== Top Results ===" in out
    assert "nor_1" in out


def test_query_with_filters_and_no_results(monkeypatch, capsys):
    _run(monkeypatch, "--query", "tak", "--category", "greetings")
    out = capsys.readouterr().out
    assert "No matching records found." in out
    assert "Did you mean: takk?" in out


def test_ask_prints_assistant_answer(monkeypatch, capsys):
    _run(monkeypatch, "--ask", "как сказать спасибо")
    assert "takk [так]" in capsys.readouterr().out


def test_suggest(monkeypatch, capsys):
    _run(monkeypatch, "--suggest", "ta")
    assert "takk" in capsys.readouterr().out.splitlines()


def test_build_only_with_stats(monkeypatch, capsys):
    _run(monkeypatch, "--build-only", "--stats")
    out = capsys.readouterr().out
    assert "=== Inverted Index Summary ===" in out
    assert "Indexed 12 records. Exiting." in out


def test_interactive_session(monkeypatch, capsys):
    answers = iter(["hei", "", "exit"])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))
    _run(monkeypatch)
    out = capsys.readouterr().out
    assert "**hei**" in out
    assert "Ha det!" in out


def test_missing_dataset_exits_with_error(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "--data", str(tmp_path / "missing.json"))
    assert exc.value.code == 1
    assert "Error loading dataset" in capsys.readouterr().out


def test_malformed_dataset_exits_with_error(monkeypatch, capsys, tmp_path):
    path = tmp_path / "words.json"
    path.write_text(
        '{"vocabulary": [{"id": 1, "norwegian": "ost", "russian": "сыр", "examples": 5}]}',
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "--data", str(path))
    assert exc.value.code == 1
    assert "Error loading dataset" in capsys.readouterr().out
