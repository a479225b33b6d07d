import io

import pytest

from pokedex.commands import (
    CommandError,
    Config,
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
from pokedex.models import (
    LocationArea,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonEncounter,
    PokemonStat,
    PokemonType,
)

PAGE1 = LocationPage(
    count=4, next="page2", previous=None,
    results=[NamedResource("alpha"), NamedResource("beta")],
)
PAGE2 = LocationPage(
    count=4, next=None, previous="page1",
    results=[NamedResource("gamma"), NamedResource("delta")],
)


class FakeClient:
    def __init__(self):
        self.page_requests = []
        self.pokemon = {}

    def list_locations(self, page_url=None):
        self.page_requests.append(page_url)
        return PAGE2 if page_url == "page2" else PAGE1

    def list_pokemon(self, location):
        return LocationArea(
            name=location,
            pokemon_encounters=[PokemonEncounter(pokemon=NamedResource("tentacool"))],
        )

    def get_pokemon(self, name):
        return self.pokemon[name]


class FixedRoll:
    def __init__(self, value):
        self.value = value
        self.bounds = []

    def randrange(self, stop):
        self.bounds.append(stop)
        return self.value


def make_cfg(roll=0):
    return Config(client=FakeClient(), out=io.StringIO(), rng=FixedRoll(roll))


def lines(cfg):
    return cfg.out.getvalue().splitlines()


def test_map_prints_names_and_tracks_pages():
    cfg = make_cfg()
    command_map(cfg)
    assert lines(cfg) == ["alpha", "beta"]
    assert cfg.next_locations_url == "page2"
    assert cfg.prev_locations_url is None
    command_map(cfg)
    assert lines(cfg)[2:] == ["gamma", "delta"]
    assert cfg.client.page_requests == [None, "page2"]


def test_mapb_on_first_page_raises():
    cfg = make_cfg()
    with pytest.raises(CommandError, match="you're on the first page"):
        command_mapb(cfg)


def test_mapb_goes_back():
    cfg = make_cfg()
    command_map(cfg)
    command_map(cfg)
    command_mapb(cfg)
    assert cfg.client.page_requests[-1] == "page1"
    assert lines(cfg)[-2:] == ["alpha", "beta"]


def test_explore_requires_one_argument():
    cfg = make_cfg()
    with pytest.raises(CommandError, match="you must provide a location name"):
        command_explore(cfg)
    with pytest.raises(CommandError):
        command_explore(cfg, "a", "b")


def test_explore_lists_pokemon():
    cfg = make_cfg()
    command_explore(cfg, "pastoria-city-area")
    assert lines(cfg) == ["Exploring pastoria-city-area...", "Found Pokemon: ", "tentacool"]


def test_catch_success_stores_pokemon():
    cfg = make_cfg(roll=40)
    pikachu = Pokemon(name="pikachu", base_experience=112)
    cfg.client.pokemon["pikachu"] = pikachu
    command_catch(cfg, "pikachu")
    assert cfg.caught_pokemon == {"pikachu": pikachu}
    assert cfg.rng.bounds == [112]
    assert "pikachu was caught!" in lines(cfg)


def test_catch_escape_does_not_store():
    cfg = make_cfg(roll=41)
    cfg.client.pokemon["pikachu"] = Pokemon(name="pikachu", base_experience=112)
    command_catch(cfg, "pikachu")
    assert cfg.caught_pokemon == {}
    assert "pikachu escaped!" in lines(cfg)


def test_catch_requires_argument_and_experience():
    cfg = make_cfg()
    with pytest.raises(CommandError, match="you must provide a pokemon name"):
        command_catch(cfg)
    cfg.client.pokemon["ghost"] = Pokemon(name="ghost", base_experience=0)
    with pytest.raises(CommandError):
        command_catch(cfg, "ghost")
    assert cfg.caught_pokemon == {}


def test_inspect_unknown_pokemon_raises():
    cfg = make_cfg()
    with pytest.raises(CommandError, match="you have not caught that pokemon"):
        command_inspect(cfg, "pikachu")


def test_inspect_prints_details():
    cfg = make_cfg()
    cfg.caught_pokemon["pikachu"] = Pokemon(
        name="pikachu", height=4, weight=60,
        stats=[PokemonStat(base_stat=35, stat=NamedResource("hp"))],
        types=[PokemonType(slot=1, type=NamedResource("electric"))],
    )
    command_inspect(cfg, "pikachu")
    assert lines(cfg) == [
        "Name: pikachu", "Height: 4", "Weight: 60",
        "Stats:", "  -hp: 35", "Types:", "  - electric",
    ]


def test_pokedex_lists_caught():
    cfg = make_cfg()
    cfg.caught_pokemon["pidgey"] = Pokemon(name="pidgey")
    cfg.caught_pokemon["rattata"] = Pokemon(name="rattata")
    command_pokedex(cfg)
    assert lines(cfg) == ["Your Pokedex:", " - pidgey", " - rattata"]


def test_help_lists_every_command():
    cfg = make_cfg()
    command_help(cfg)
    output = lines(cfg)
    assert "Welcome to the Pokedex!" in output
    for cmd in get_commands().values():
        assert f"{cmd.name}: {cmd.description}" in output


def test_exit_raises_system_exit():
    cfg = make_cfg()
    with pytest.raises(SystemExit) as info:
        command_exit(cfg)
    assert info.value.code == 0
    assert lines(cfg) == ["Closing the Pokedex... Goodbye!"]


def test_get_commands_keys():
    commands = get_commands()
    assert set(commands) == {"help", "pokedex", "catch", "explore", "inspect", "map", "mapb", "exit"}
    assert commands["map"].callback is command_map