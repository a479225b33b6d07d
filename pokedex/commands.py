"""The commands understood by the Pokedex prompt."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

from .models import Pokemon


class CommandError(Exception):
    """Raised when a command cannot be carried out."""


@dataclass
class Config:
    """State shared between commands during a session."""

    client: Any
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    out: TextIO | None = None
    rng: Any = field(default_factory=random.Random)

    def say(self, *args: object, **kwargs: Any) -> None:
        print(*args, file=self.out, **kwargs)


@dataclass(frozen=True)
class CliCommand:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def command_exit(cfg: Config, *args: str) -> None:
    cfg.say("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def command_help(cfg: Config, *args: str) -> None:
    cfg.say()
    cfg.say("Welcome to the Pokedex!")
    cfg.say("Usage:")
    cfg.say()
    for cmd in get_commands().values():
        cfg.say(f"{cmd.name}: {cmd.description}")
    cfg.say()


def _show_locations(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        cfg.say(location.name)


def command_map(cfg: Config, *args: str) -> None:
    _show_locations(cfg, cfg.next_locations_url)


def command_mapb(cfg: Config, *args: str) -> None:
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_locations(cfg, cfg.prev_locations_url)


def command_explore(cfg: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    area = cfg.client.list_pokemon(args[0])
    cfg.say(f"Exploring {area.name}...")
    cfg.say("Found Pokemon: ")
    for encounter in area.pokemon_encounters:
        cfg.say(encounter.pokemon.name)


def command_catch(cfg: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    pokemon = cfg.client.get_pokemon(args[0])
    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name} has no base experience and cannot be caught")
    roll = cfg.rng.randrange(pokemon.base_experience)
    cfg.say(f"Throwing a Pokeball at {pokemon.name}...")
    if roll > 40:
        cfg.say(f"{pokemon.name} escaped!")
        return
    cfg.say(f"{pokemon.name} was caught!")
    cfg.caught_pokemon[pokemon.name] = pokemon
    cfg.say("You may now inspect it with the inspect command.")


def command_inspect(cfg: Config, *args: str) -> None:
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    pokemon = cfg.caught_pokemon.get(args[0])
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")
    cfg.say("Name:", pokemon.name)
    cfg.say("Height:", pokemon.height)
    cfg.say("Weight:", pokemon.weight)
    cfg.say("Stats:")
    for stat in pokemon.stats:
        cfg.say(f"  -{stat.stat.name}: {stat.base_stat}")
    cfg.say("Types:")
    for type_info in pokemon.types:
        cfg.say("  -", type_info.type.name)


def command_pokedex(cfg: Config, *args: str) -> None:
    cfg.say("Your Pokedex:")
    for pokemon in cfg.caught_pokemon.values():
        cfg.say(f" - {pokemon.name}")


def get_commands() -> dict[str, CliCommand]:
    """Return every command keyed by the word that invokes it."""
    return {
        "help": CliCommand("help", "Displays a help message", command_help),
        "pokedex": CliCommand("pokedex", "Show pokedex", command_pokedex),
        "catch": CliCommand("catch <pokemon>", "Catch a pokemon", command_catch),
        "explore": CliCommand("explore <location_name>", "Explore a location", command_explore),
        "inspect": CliCommand("inspect <pokemon>", "Inspect a Pokemon", command_inspect),
        "map": CliCommand("map", "Get the next page of locations", command_map),
        "mapb": CliCommand("mapb", "Get the previous page of locations", command_mapb),
        "exit": CliCommand("exit", "Exit the Pokedex", command_exit),
    }