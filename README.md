# pokedex

An interactive command-line Pokédex. You can page through the location
areas of the Pokémon world, explore an area to see which pokémon appear
there, try to catch them and inspect the ones you have caught. Data comes
from the public PokéAPI. Raw responses are kept in an in-memory cache for
five minutes, so revisiting a page or a pokémon within that time does not
fetch it again.

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no third-party dependencies.

## Usage

Start the interactive prompt:

```
pokedex
```

The command takes no options apart from `--help`. You get a `Pokedex > `
prompt. Input is lower-cased and split on whitespace, so case and extra
spaces do not matter. An empty line is ignored, an unknown word prints
`Unknown command`, and the prompt ends when standard input ends. These
commands are available:

| Command             | What it does                                      |
|---------------------|---------------------------------------------------|
| `help`              | Displays a help message.                          |
| `map`               | Get the next page of locations.                   |
| `mapb`              | Get the previous page of locations.               |
| `explore <area>`    | Explore a location.                               |
| `catch <pokemon>`   | Attempt to catch a pokémon!                       |
| `inspect <pokemon>` | Inspect a captured pokémon.                       |
| `pokedex`           | See all the pokémon you've caught.                |
| `exit`              | Exit the Pokédex.                                 |

`mapb` on the first page prints `you're on the first page`. `inspect` only
works for pokémon you have caught. Failed requests and unreadable responses
are printed as an error message and the prompt carries on.

A short session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found pokémon:
 - tentacool
 - tentacruel
 ...
Pokedex > catch tentacool
Throwing a pokéball at tentacool...
You have a 75% chance to catch tentacool
You rolled 12 and caught tentacool!
You can now inspect it with the inspect command.
Pokedex > inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
  hp: 40
  ...
Types:
  water
  poison
```

### Catching

The chance of catching a pokémon depends on its base experience: one tenth
of `1000 - base_experience` percent, kept between 25 and 80 (see
`pokedex.commands.catch_chance`). A random roll from 0 to 99 that is not
above the chance catches it.

## What it does not do

Caught pokémon live only in memory for the current session; nothing is
saved to disk, so the pokédex starts empty each time the program starts.

## Using it as a library

- `pokedex.cache.Cache(interval)`: a thread-safe in-memory cache of byte
  strings. `add`, `get` (returns `None` for a missing key), `len()`,
  `reap(now)` and `close()`; a background thread drops entries older than
  `interval` seconds. Usable as a context manager.
- `pokedex.client.Client(timeout=5.0, cache_interval=300.0, fetch=None)`:
  a caching client with `list_locations(page_url)`, `location(name)` and
  `get_pokemon(name)`. `fetch(url, timeout)` may be given to supply response
  bodies in place of HTTP. Failures raise `pokedex.client.PokeAPIError`.
  Usable as a context manager; `close()` stops the cache's reaper.
- `pokedex.models`: frozen dataclasses `NamedResource`, `PokemonStat`,
  `PokemonType`, `Pokemon`, `LocationPage` and `LocationArea`, each built
  from the API's JSON with `from_dict`, which raises `ValueError` on fields
  of the wrong type.
- `pokedex.commands`: the prompt's commands, the `Config` they share,
  `Command`, `CommandError`, `catch_chance` and `get_commands()`.
- `pokedex.repl`: `clean_input`, `start_repl(cfg, stream=None)` and `main`.

```python
from pokedex.client import Client

with Client(timeout=5, cache_interval=300) as client:
    page = client.list_locations(None)
    for area in page.results:
        print(area.name)
```

## Running the tests

```
pip install ".[test]"
python -m pytest
```