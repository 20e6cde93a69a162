"""Static display tables: type colors, stat labels and stat severity colors."""
from types import MappingProxyType

DEFAULT_TYPE_COLOR = "#68A090"

# Official type colors from the games
TYPE_COLORS = MappingProxyType({
    "normal": "#A8A878",
    "fire": "#F08030",
    "water": "#6890F0",
    "electric": "#F8D030",
    "grass": "#78C850",
    "ice": "#98D8D8",
    "fighting": "#C03028",
    "poison": "#A040A0",
    "ground": "#E0C068",
    "flying": "#A890F0",
    "psychic": "#F85888",
    "bug": "#A8B820",
    "rock": "#B8A038",
    "ghost": "#705898",
    "dragon": "#7038F8",
    "dark": "#705848",
    "steel": "#B8B8D0",
    "fairy": "#EE99AC",
})

STAT_LABELS = MappingProxyType({
    "hp": "HP",
    "attack": "Attack",
    "defense": "Defense",
    "special-attack": "Sp. Attack",
    "special-defense": "Sp. Defense",
    "speed": "Speed",
})

# (minimum value, color), checked top to bottom
STAT_COLOR_THRESHOLDS = (
    (100, "#4CAF50"),
    (80, "#8BC34A"),
    (60, "#FFC107"),
    (40, "#FF9800"),
)
LOWEST_STAT_COLOR = "#F44336"

# Base value that fills a stat bar completely
STAT_BAR_MAX = 200


def type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)


def list_color(types: list[str]) -> str:
    """Color of the first type that has one, as the list cards use."""
    return next((TYPE_COLORS[t] for t in types if t in TYPE_COLORS), DEFAULT_TYPE_COLOR)


def primary_type_color(types: list[str]) -> str:
    """Color of the first type only, as the detail header uses."""
    if not types:
        return DEFAULT_TYPE_COLOR
    return type_color(types[0])


def stat_label(key: str) -> str:
    return STAT_LABELS.get(key, key)


def stat_color(value: int) -> str:
    for minimum, color in STAT_COLOR_THRESHOLDS:
        if value >= minimum:
            return color
    return LOWEST_STAT_COLOR


def stat_bar_percent(value: int) -> float:
    return min(value * 100 / STAT_BAR_MAX, 100.0)
