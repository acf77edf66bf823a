"""Typed views of the PokeAPI JSON documents the pokédex uses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string or null, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array, got {value!r}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the API URL it refers to."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data)
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class PokemonStat:
    """One base stat of a pokémon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _mapping(data)
        return cls(
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
            stat=NamedResource.from_dict(data.get("stat")),
        )


@dataclass(frozen=True)
class PokemonType:
    """One type slot of a pokémon."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        data = _mapping(data)
        return cls(slot=_int(data, "slot"), type=NamedResource.from_dict(data.get("type")))


@dataclass(frozen=True)
class Pokemon:
    """A pokémon as described by the ``/pokemon/{name}`` endpoint."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    location_area_encounters: str = ""
    species: NamedResource = field(default_factory=NamedResource)
    abilities: tuple[NamedResource, ...] = ()
    forms: tuple[NamedResource, ...] = ()
    moves: tuple[NamedResource, ...] = ()
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[PokemonType, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _mapping(data)
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            order=_int(data, "order"),
            is_default=_bool(data, "is_default"),
            location_area_encounters=_str(data, "location_area_encounters"),
            species=NamedResource.from_dict(data.get("species")),
            abilities=tuple(
                NamedResource.from_dict(_mapping(a).get("ability"))
                for a in _list(data, "abilities")
            ),
            forms=tuple(NamedResource.from_dict(f) for f in _list(data, "forms")),
            moves=tuple(
                NamedResource.from_dict(_mapping(m).get("move")) for m in _list(data, "moves")
            ),
            stats=tuple(PokemonStat.from_dict(s) for s in _list(data, "stats")),
            types=tuple(PokemonType.from_dict(t) for t in _list(data, "types")),
        )


@dataclass(frozen=True)
class LocationPage:
    """One page of the ``/location-area`` listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _mapping(data)
        return cls(
            count=_int(data, "count"),
            next=_opt_str(data, "next"),
            previous=_opt_str(data, "previous"),
            results=tuple(NamedResource.from_dict(r) for r in _list(data, "results")),
        )


@dataclass(frozen=True)
class LocationArea:
    """A location area and the pokémon that can be encountered there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: tuple[NamedResource, ...] = ()
    encounter_methods: tuple[NamedResource, ...] = ()
    pokemon_encounters: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        data = _mapping(data)
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            names=tuple(
                NamedResource(
                    name=_str(_mapping(n), "name"),
                    url=NamedResource.from_dict(_mapping(n).get("language")).url,
                )
                for n in _list(data, "names")
            ),
            encounter_methods=tuple(
                NamedResource.from_dict(_mapping(m).get("encounter_method"))
                for m in _list(data, "encounter_method_rates")
            ),
            pokemon_encounters=tuple(
                NamedResource.from_dict(_mapping(e).get("pokemon"))
                for e in _list(data, "pokemon_encounters")
            ),
        )