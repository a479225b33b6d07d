"""The interactive Pokedex prompt."""

from __future__ import annotations

import argparse
import sys
from datetime import timedelta
from typing import Sequence, TextIO

from .api import ApiError, Client
from .commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case the text and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stream: TextIO) -> None:
    """Read commands from ``stream`` and run them until it is exhausted."""
    commands = get_commands()
    while True:
        cfg.say(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            cfg.say()
            return
        words = clean_input(line)
        if not words:
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            cfg.say("Unknown command")
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, ApiError) as exc:
            cfg.say(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the Pokedex prompt on standard input."""
    parser = argparse.ArgumentParser(prog="pokedex", description="Explore the Pokémon world.")
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=timedelta(minutes=5)) as client:
        start_repl(Config(client=client), sys.stdin)
    return 0