"""Typed views of the responses served by the Pokémon web API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key}: expected an integer, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"{key}: expected a boolean, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key}: expected a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key}: expected a string or null, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{key}: expected a JSON array, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        obj = _mapping(data, "named resource")
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        obj = _mapping(data, "location page")
        return cls(
            count=_int(obj, "count"),
            next=_optional_str(obj, "next"),
            previous=_optional_str(obj, "previous"),
            results=[NamedResource.from_dict(r) for r in _list(obj, "results")],
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokémon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)
    version_details: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        obj = _mapping(data, "pokemon encounter")
        details = [dict(_mapping(d, "version detail")) for d in _list(obj, "version_details")]
        return cls(
            pokemon=NamedResource.from_dict(obj.get("pokemon")),
            version_details=details,
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the Pokémon encountered there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: list[dict[str, Any]] = field(default_factory=list)
    encounter_method_rates: list[dict[str, Any]] = field(default_factory=list)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        obj = _mapping(data, "location area")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            game_index=_int(obj, "game_index"),
            location=NamedResource.from_dict(obj.get("location")),
            names=[dict(_mapping(n, "name")) for n in _list(obj, "names")],
            encounter_method_rates=[
                dict(_mapping(r, "encounter method rate"))
                for r in _list(obj, "encounter_method_rates")
            ],
            pokemon_encounters=[
                PokemonEncounter.from_dict(e) for e in _list(obj, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokémon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        obj = _mapping(data, "pokemon stat")
        return cls(
            base_stat=_int(obj, "base_stat"),
            effort=_int(obj, "effort"),
            stat=NamedResource.from_dict(obj.get("stat")),
        )


@dataclass(frozen=True)
class PokemonType:
    """A type slot of a Pokémon."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        obj = _mapping(data, "pokemon type")
        return cls(slot=_int(obj, "slot"), type=NamedResource.from_dict(obj.get("type")))


@dataclass(frozen=True)
class Pokemon:
    """A Pokémon as described by the API."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    is_default: bool = False
    order: int = 0
    location_area_encounters: str = ""
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[dict[str, Any]] = field(default_factory=list)
    forms: list[NamedResource] = field(default_factory=list)
    moves: list[dict[str, Any]] = field(default_factory=list)
    sprites: dict[str, Any] = field(default_factory=dict)
    cries: dict[str, Any] = field(default_factory=dict)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        obj = _mapping(data, "pokemon")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            base_experience=_int(obj, "base_experience"),
            height=_int(obj, "height"),
            weight=_int(obj, "weight"),
            is_default=_bool(obj, "is_default"),
            order=_int(obj, "order"),
            location_area_encounters=_str(obj, "location_area_encounters"),
            species=NamedResource.from_dict(obj.get("species")),
            abilities=[dict(_mapping(a, "ability")) for a in _list(obj, "abilities")],
            forms=[NamedResource.from_dict(f) for f in _list(obj, "forms")],
            moves=[dict(_mapping(m, "move")) for m in _list(obj, "moves")],
            sprites=dict(_mapping(obj.get("sprites"), "sprites")),
            cries=dict(_mapping(obj.get("cries"), "cries")),
            stats=[PokemonStat.from_dict(s) for s in _list(obj, "stats")],
            types=[PokemonType.from_dict(t) for t in _list(obj, "types")],
        )