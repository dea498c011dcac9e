from __future__ import annotations

import io
import json
import logging
from contextlib import ExitStack
from pathlib import Path
import sys
from types import SimpleNamespace

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import morse_tree_decoder.cli as cli


def test_resolve_prefers_inline_messages_list():
    with ExitStack() as stack:
        lines, interactive = cli._resolve_command_source("...", ["---", "..."], stack=stack)

        assert list(lines) == ["...", "---", "..."]
        assert interactive is False


def test_resolve_reads_messages_from_file(tmp_path):
    message_file = tmp_path / "messages.txt"
    message_file.write_text("... --- ...\n.- -...\n", encoding="utf-8")

    with ExitStack() as stack:
        lines, interactive = cli._resolve_command_source(str(message_file), [], stack=stack)

        assert [line.rstrip("\n") for line in lines] == ["... --- ...", ".- -..."]
        assert interactive is False


def test_resolve_treats_unknown_path_as_inline_message():
    with ExitStack() as stack:
        lines, interactive = cli._resolve_command_source(".- / -...", [], stack=stack)

        assert list(lines) == [".- / -..."]
        assert interactive is False


def test_resolve_uses_stdin(monkeypatch):
    fake_stdin = io.StringIO("... --- ...\n")
    monkeypatch.setattr(cli, "sys", SimpleNamespace(stdin=fake_stdin, stdout=sys.stdout))

    with ExitStack() as stack:
        lines, interactive = cli._resolve_command_source("-", [], stack=stack)

    assert [line.rstrip("\n") for line in lines] == ["... --- ..."]
    assert interactive is False


def test_main_decodes_inline_messages(capsys):
    assert cli.main(["... --- ...", ".- ......."]) == 0
    assert capsys.readouterr().out.splitlines() == ["SOS", "A?"]


def test_main_decodes_stdin_until_quit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(".... ..\n\nquit\n-\n"))
    assert cli.main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["HI"]


def test_main_registers_extra_symbols(tmp_path, capsys):
    symbol_file = tmp_path / "extra.json"
    symbol_file.write_text(json.dumps({"Ä": ".-.-"}), encoding="utf-8")

    exit_code = cli.main(
        [".-.- .----.", "--symbols", str(symbol_file), "--register", "'=.----."]
    )

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["Ä'"]


def test_main_custom_placeholder(capsys):
    assert cli.main(["--placeholder", "#", "......."]) == 0
    assert capsys.readouterr().out.splitlines() == ["#"]


def test_main_reports_invalid_registration(caplog, capsys):
    with caplog.at_level(logging.ERROR):
        assert cli.main(["--register", "'=.-x", "..."]) == 2
    assert "Unable to build symbol table" in caplog.text
    assert capsys.readouterr().out == ""


def test_main_reports_colliding_registration(caplog):
    with caplog.at_level(logging.ERROR):
        assert cli.main(["--register", "#=...", "..."]) == 2
    assert "already assigned" in caplog.text


def test_main_replace_allows_overwriting(capsys):
    assert cli.main(["--register", "#=...", "--replace", "... ---"]) == 0
    assert capsys.readouterr().out.splitlines() == ["#O"]


def test_main_lists_symbols(capsys):
    assert cli.main(["--list-symbols", "--register", "'=.----."]) == 0
    output = capsys.readouterr().out
    assert output.startswith("Char | Code")
    assert "'    | .----." in output
