"""The commands the pokédex prompt understands."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from pokedex.client import Client
from pokedex.models import Pokemon


class CommandError(Exception):
    """Raised when a command cannot be carried out as asked."""


@dataclass
class Config:
    """State shared by the commands across one session."""

    client: Client
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    next_location_url: str | None = None
    prev_location_url: str | None = None
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its description and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def catch_chance(base_experience: int) -> int:
    """Return the percentage chance of catching a pokémon, between 25 and 80."""
    chance = int((1000 - base_experience) / 10)
    return max(25, min(80, chance))


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a pokéball at a pokémon and add it to the pokédex if it is caught."""
    if len(args) != 1:
        raise CommandError("you must provide a pokémon name")
    name = args[0]
    pokemon = cfg.client.get_pokemon(name)
    chance = catch_chance(pokemon.base_experience)

    print(f"Throwing a pokéball at {name}...")
    print(f"You have a {chance}% chance to catch {pokemon.name}")

    roll = cfg.rng.randrange(100)
    if roll <= chance:
        print(f"You rolled {roll} and caught {pokemon.name}!")
        print("You can now inspect it with the inspect command.")
        cfg.pokedex[pokemon.name] = pokemon
    else:
        print(f"You rolled {roll} and {pokemon.name} escaped!")


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye, release the client's resources and end the program."""
    print("Closing the pokédex... Goodbye!")
    cfg.client.close()
    sys.exit(0)


def command_explore(cfg: Config, *args: str) -> None:
    """List the pokémon that can be found in a location area."""
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    location = cfg.client.location(args[0])
    print(f"Exploring {location.name}...")
    print("Found pokémon:")
    for encounter in location.pokemon_encounters:
        print(f" - {encounter.name}")


def command_help(cfg: Config, *args: str) -> None:
    """Print the list of commands."""
    print("Welcome to the pokédex!")
    print()
    print("Usage:")
    for command in get_commands().values():
        print(f"    {command.name}: {command.description}")


def command_inspect(cfg: Config, *args: str) -> None:
    """Print the details of a caught pokémon."""
    if len(args) != 1:
        raise CommandError("you must provide a pokémon name")
    pokemon = cfg.pokedex.get(args[0])
    if pokemon is None:
        raise CommandError("you have not caught that pokémon")

    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  {stat.stat.name}: {stat.base_stat}")
    print("Types:")
    for info in pokemon.types:
        print(f"  {info.type.name}")


def _show_locations(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_location_url = page.next
    cfg.prev_location_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(cfg: Config, *args: str) -> None:
    """Print the next page of location areas."""
    _show_locations(cfg, cfg.next_location_url)


def command_mapb(cfg: Config, *args: str) -> None:
    """Print the previous page of location areas."""
    if cfg.prev_location_url is None:
        raise CommandError("you're on the first page")
    _show_locations(cfg, cfg.prev_location_url)


def command_pokedex(cfg: Config, *args: str) -> None:
    """Print the names of every caught pokémon."""
    print("Your pokédex:")
    for pokemon in cfg.pokedex.values():
        print("  ", pokemon.name)


def get_commands() -> dict[str, Command]:
    """Return every command, keyed by name."""
    commands = [
        Command("catch", "Attempt to catch a pokémon!", command_catch),
        Command("explore", "Explore a location.", command_explore),
        Command("help", "Displays a help message.", command_help),
        Command("inspect", "Inspect a captured pokémon.", command_inspect),
        Command("map", "Get the next page of locations.", command_map),
        Command("mapb", "Get the previous page of locations.", command_mapb),
        Command("pokedex", "See all the pokémon you've caught.", command_pokedex),
        Command("exit", "Exit the Pokédex.", command_exit),
    ]
    return {command.name: command for command in commands}