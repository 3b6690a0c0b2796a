import io

import pytest

from loxscan import main, scan
from loxscan.lox import Lox


def test_scan_prints_tokens(capsys):
    tokens = scan("print 1;")

    assert len(tokens) == 4
    assert capsys.readouterr().out.splitlines() == [
        "PRINT print print",
        "NUMBER 1 1.0",
        "SEMICOLON ; None",
        "EOF  None",
    ]


def test_scan_reports_lexical_error(capsys):
    assert scan("1\n@") == []

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[line 2] Error: Unexpected character '@'.\n"
    assert Lox.had_error


def test_main_scan_file(tmp_path, capsys):
    script = tmp_path / "hello.lox"
    script.write_text('var a = "hi"; // greeting\n')

    main(["loxscan", str(script)])

    assert capsys.readouterr().out.splitlines() == [
        "VAR var var",
        "IDENTIFIER a a",
        "EQUAL = None",
        'STRING "hi" hi',
        "SEMICOLON ; None",
        "EOF  None",
    ]


def test_main_scan_file_command(tmp_path, capsys):
    script = tmp_path / "empty.lox"
    script.write_text("")

    main(["loxscan", "scan_file", str(script)])

    assert capsys.readouterr().out == "EOF  None\n"


def test_main_scan_source(capsys):
    main(["loxscan", "scan", "a != b"])

    assert capsys.readouterr().out.splitlines() == [
        "IDENTIFIER a a",
        "BANG_EQUAL != None",
        "IDENTIFIER b b",
        "EOF  None",
    ]


def test_main_scan_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("nil"))

    main(["loxscan", "scan", "-"])

    assert capsys.readouterr().out.splitlines() == ["NIL nil nil", "EOF  None"]


def test_main_lexical_error_exit_code(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["loxscan", "scan", '"open'])

    assert excinfo.value.code == 65
    assert capsys.readouterr().err == "[line 1] Error: Unterminated string.\n"


def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["loxscan", str(tmp_path / "missing.lox")])

    assert excinfo.value.code == 66
    assert "not found" in capsys.readouterr().err


def test_main_unrecognized_command(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["loxscan", "run", "1"])

    assert excinfo.value.code == 66
    assert capsys.readouterr().err == "unrecognized command: run\n"


def test_main_usage(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["loxscan", "scan", "1", "2"])

    assert excinfo.value.code == 64
    assert capsys.readouterr().out.startswith("Usage")


def test_scan_prompt(monkeypatch, capsys):
    lines = iter(["1 @", "2", ""])
    monkeypatch.setattr("builtins.input", lambda prompt: next(lines))

    main(["loxscan", "scan_prompt"])

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["NUMBER 2 2.0", "EOF  None"]
    assert captured.err == "[line 1] Error: Unexpected character '@'.\n"
    # Errors in the prompt do not stick.
    assert not Lox.had_error
