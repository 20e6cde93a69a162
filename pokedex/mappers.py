"""
Maps raw PokeAPI JSON into the application's records.

Missing optional fields are null-coalesced so one malformed record never sinks
a whole collection. Only a missing entity name is fatal.
"""
import re

from pokedex import config
from pokedex.clients.pokeapi_client import MalformedDataError
from pokedex import theme
from pokedex.models import (
    Ability,
    PokemonDetail,
    PokemonSummary,
    SpeciesInfo,
    Sprites,
    StatEntry,
)

_WORD_START = re.compile(r"\b\w")


def _title(text: str) -> str:
    return _WORD_START.sub(lambda m: m.group().upper(), text)


def _required_name(raw: dict, phase: str = "Pokemon") -> str:
    name = raw.get("name") if isinstance(raw, dict) else None
    if not name:
        raise MalformedDataError(f"{phase} record has no name", phase=phase)
    return name


def _sprites(raw: dict) -> dict:
    return raw.get("sprites") or {}


def select_image(raw: dict) -> str:
    """Official artwork first, then the basic front sprite, else an empty string."""
    sprites = _sprites(raw)
    artwork = ((sprites.get("other") or {}).get("official-artwork") or {}).get("front_default")
    return artwork or sprites.get("front_default") or ""


def type_names(raw: dict) -> list[str]:
    # Upstream order, upstream guarantees uniqueness
    return [
        entry["type"]["name"]
        for entry in raw.get("types") or []
        if (entry.get("type") or {}).get("name")
    ]


def to_summary(raw: dict) -> PokemonSummary:
    name = _required_name(raw)
    types = type_names(raw)
    return PokemonSummary(
        name=name,
        id=raw.get("id"),
        image_url=select_image(raw),
        types=types,
        color=theme.list_color(types),
    )


def _tenths(value: int | None) -> float | None:
    return None if value is None else value / 10


def _display(value: float | None, unit: str) -> str:
    return "" if value is None else f"{value:.1f} {unit}"


def to_stats(raw: dict) -> list[StatEntry]:
    stats = []
    for entry in raw.get("stats") or []:
        key = (entry.get("stat") or {}).get("name")
        if not key:
            continue
        base_value = entry.get("base_stat") or 0
        stats.append(StatEntry(
            name=key,
            label=theme.stat_label(key),
            base_value=base_value,
            color=theme.stat_color(base_value),
            bar_percent=theme.stat_bar_percent(base_value),
        ))
    return stats


def to_abilities(raw: dict) -> list[Ability]:
    abilities = []
    for entry in raw.get("abilities") or []:
        name = (entry.get("ability") or {}).get("name")
        if not name:
            continue
        abilities.append(Ability(
            name=name,
            display_name=_title(name.replace("-", " ")),
            is_hidden=bool(entry.get("is_hidden")),
        ))
    return abilities


def to_detail(raw: dict) -> PokemonDetail:
    name = _required_name(raw)
    types = type_names(raw)
    sprites = _sprites(raw)
    identifier = raw.get("id")
    height_m = _tenths(raw.get("height"))
    weight_kg = _tenths(raw.get("weight"))

    return PokemonDetail(
        id=identifier,
        name=name,
        display_number="" if identifier is None else f"#{identifier:03d}",
        height=raw.get("height"),
        weight=raw.get("weight"),
        height_m=height_m,
        weight_kg=weight_kg,
        height_display=_display(height_m, "m"),
        weight_display=_display(weight_kg, "kg"),
        base_experience=raw.get("base_experience"),
        types=types,
        color=theme.primary_type_color(types),
        stats=to_stats(raw),
        abilities=to_abilities(raw),
        sprites=Sprites(
            artwork=select_image(raw),
            front_default=sprites.get("front_default"),
            front_shiny=sprites.get("front_shiny"),
            back_default=sprites.get("back_default"),
            back_shiny=sprites.get("back_shiny"),
        ),
    )


def clean_flavor_text(text: str) -> str:
    """Replaces the form feeds and line breaks embedded in game text with spaces."""
    return text.replace("\f", " ").replace("\r", " ").replace("\n", " ")


def _localized(entries: list[dict] | None, language: str, field: str) -> str | None:
    return next(
        (
            entry.get(field)
            for entry in entries or []
            if (entry.get("language") or {}).get("name") == language
        ),
        None,
    )


def to_species(raw: dict, language: str | None = None) -> SpeciesInfo:
    language = language or config.DESCRIPTION_LANGUAGE
    if not isinstance(raw, dict):
        raise MalformedDataError("species record is not an object", phase="species")

    flavor_text = _localized(raw.get("flavor_text_entries"), language, "flavor_text")
    habitat = (raw.get("habitat") or {}).get("name")

    return SpeciesInfo(
        description=clean_flavor_text(flavor_text) if flavor_text else "",
        genus=_localized(raw.get("genera"), language, "genus") or "",
        habitat=habitat,
        habitat_label=_title(habitat.replace("-", " ")) if habitat else None,
    )
