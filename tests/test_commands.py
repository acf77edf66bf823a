import json

import pytest

from pokedex.client import BASE_URL, Client
from pokedex.commands import (
    CommandError,
    Config,
    catch_chance,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_map,
    command_mapb,
    command_pokedex,
    get_commands,
)

PIKACHU = {
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "stats": [{"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u"}}],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u"}}],
}

FIRST_PAGE = BASE_URL + "/location-area"
SECOND_PAGE = BASE_URL + "/location-area?offset=20&limit=20"

DOCUMENTS = {
    BASE_URL + "/pokemon/pikachu": PIKACHU,
    BASE_URL + "/location-area/pastoria-city-area": {
        "name": "pastoria-city-area",
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool"}},
            {"pokemon": {"name": "magikarp"}},
        ],
    },
    FIRST_PAGE: {"next": SECOND_PAGE, "previous": None, "results": [{"name": "first-area"}]},
    SECOND_PAGE: {"next": None, "previous": FIRST_PAGE, "results": [{"name": "second-area"}]},
}


class FixedRoll:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert stop == 100
        return self.value


@pytest.fixture
def cfg():
    client = Client(fetch=lambda url, timeout: json.dumps(DOCUMENTS[url]).encode())
    yield Config(client=client)
    client.close()


def test_catch_chance_is_clamped():
    assert catch_chance(0) == 80
    assert catch_chance(5000) == 25
    assert catch_chance(500) == 50


def test_catch_chance_stays_in_bounds():
    for experience in range(-100, 1500, 7):
        assert 25 <= catch_chance(experience) <= 80


def test_catch_success_adds_to_pokedex(cfg, capsys):
    cfg.rng = FixedRoll(0)
    command_catch(cfg, "pikachu")
    assert "pikachu" in cfg.pokedex
    assert "caught pikachu!" in capsys.readouterr().out


def test_catch_at_exact_chance_succeeds(cfg):
    cfg.rng = FixedRoll(catch_chance(PIKACHU["base_experience"]))
    command_catch(cfg, "pikachu")
    assert cfg.pokedex["pikachu"].height == 4


def test_catch_failure_leaves_pokedex_empty(cfg, capsys):
    cfg.rng = FixedRoll(99)
    command_catch(cfg, "pikachu")
    assert cfg.pokedex == {}
    assert "pikachu escaped!" in capsys.readouterr().out


def test_catch_requires_one_name(cfg):
    with pytest.raises(CommandError, match="pokémon name"):
        command_catch(cfg)
    with pytest.raises(CommandError):
        command_catch(cfg, "a", "b")


def test_inspect_prints_details(cfg, capsys):
    cfg.rng = FixedRoll(0)
    command_catch(cfg, "pikachu")
    capsys.readouterr()
    command_inspect(cfg, "pikachu")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Name: pikachu",
        "Height: 4",
        "Weight: 60",
        "Stats:",
        "  hp: 35",
        "Types:",
        "  electric",
    ]


def test_inspect_unknown_pokemon(cfg):
    with pytest.raises(CommandError, match="not caught"):
        command_inspect(cfg, "pikachu")
    with pytest.raises(CommandError):
        command_inspect(cfg)


def test_explore_lists_encounters(cfg, capsys):
    command_explore(cfg, "pastoria-city-area")
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Exploring pastoria-city-area..."
    assert out[2:] == [" - tentacool", " - magikarp"]


def test_explore_requires_name(cfg):
    with pytest.raises(CommandError, match="location name"):
        command_explore(cfg)


def test_map_pages_forward_and_back(cfg, capsys):
    command_map(cfg)
    assert capsys.readouterr().out == "first-area\n"
    assert cfg.next_location_url == SECOND_PAGE
    command_map(cfg)
    assert capsys.readouterr().out == "second-area\n"
    assert cfg.prev_location_url == FIRST_PAGE
    command_mapb(cfg)
    assert capsys.readouterr().out == "first-area\n"
    assert cfg.prev_location_url is None


def test_mapb_on_first_page(cfg):
    with pytest.raises(CommandError, match="first page"):
        command_mapb(cfg)


def test_pokedex_lists_caught(cfg, capsys):
    cfg.rng = FixedRoll(0)
    command_catch(cfg, "pikachu")
    capsys.readouterr()
    command_pokedex(cfg)
    assert capsys.readouterr().out.splitlines() == ["Your pokédex:", "   pikachu"]


def test_help_lists_every_command(cfg, capsys):
    command_help(cfg)
    out = capsys.readouterr().out
    for name, command in get_commands().items():
        assert f"    {name}: {command.description}" in out


def test_command_names_match_keys():
    commands = get_commands()
    assert set(commands) == {"catch", "explore", "help", "inspect", "map", "mapb", "pokedex", "exit"}
    assert all(key == command.name for key, command in commands.items())


def test_exit_raises_system_exit(cfg):
    with pytest.raises(SystemExit) as info:
        command_exit(cfg)
    assert info.value.code == 0