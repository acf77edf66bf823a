"""The interactive prompt of the pokédex."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from pokedex.client import Client, PokeAPIError
from pokedex.commands import CommandError, Config, get_commands


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stream: TextIO | None = None) -> None:
    """Read commands from ``stream`` (standard input by default) until it ends."""
    if stream is None:
        stream = sys.stdin
    commands = get_commands()
    while True:
        print("Pokedex > ", end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            return
        words = clean_input(line)
        if not words:
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, PokeAPIError) as exc:
            print(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pokédex prompt."""
    parser = argparse.ArgumentParser(prog="pokedex", description="An interactive pokédex.")
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())