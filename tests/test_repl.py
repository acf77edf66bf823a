import io

import pytest

from pokedex.client import Client
from pokedex.commands import Config
from pokedex.repl import clean_input, main, start_repl


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  ", []),
        ("  hello  ", ["hello"]),
        ("  hello  world  ", ["hello", "world"]),
        ("  Hello  World  ", ["hello", "world"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


@pytest.fixture
def cfg():
    def no_network(url, timeout):
        raise OSError("offline")

    client = Client(fetch=no_network)
    yield Config(client=client)
    client.close()


def test_unknown_command(cfg, capsys):
    start_repl(cfg, io.StringIO("dance\n"))
    assert "Unknown command" in capsys.readouterr().out


def test_blank_lines_are_skipped(cfg, capsys):
    start_repl(cfg, io.StringIO("\n   \n"))
    out = capsys.readouterr().out
    assert out.count("Pokedex > ") == 3
    assert "Unknown command" not in out


def test_command_errors_are_printed(cfg, capsys):
    start_repl(cfg, io.StringIO("inspect\nmapb\n"))
    out = capsys.readouterr().out
    assert "you must provide a pokémon name" in out
    assert "you're on the first page" in out


def test_client_errors_are_printed(cfg, capsys):
    start_repl(cfg, io.StringIO("catch pikachu\n"))
    assert "offline" in capsys.readouterr().out


def test_input_is_lowercased(cfg, capsys):
    start_repl(cfg, io.StringIO("  HELP  \n"))
    assert "Welcome to the pokédex!" in capsys.readouterr().out


def test_exit_command_stops(cfg, capsys):
    with pytest.raises(SystemExit):
        start_repl(cfg, io.StringIO("exit\nhelp\n"))
    out = capsys.readouterr().out
    assert "Goodbye!" in out
    assert "Welcome" not in out


def test_main_returns_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("help\n"))
    assert main([]) == 0
    assert "Usage:" in capsys.readouterr().out