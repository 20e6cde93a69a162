from pydantic import BaseModel, ConfigDict, Field

# Lightweight pointer returned by the list endpoint (Internal Contract)
class PokemonReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str

# Record shown in the list view, one per reference
class PokemonSummary(BaseModel):
    name: str
    id: int | None
    image_url: str = ""
    types: list[str] = Field(default_factory=list)
    color: str

class StatEntry(BaseModel):
    name: str
    label: str
    base_value: int
    color: str
    bar_percent: float

class Ability(BaseModel):
    name: str
    display_name: str
    is_hidden: bool = False

class Sprites(BaseModel):
    # Preferred image: official artwork, falling back to the basic front sprite
    artwork: str = ""
    front_default: str | None = None
    front_shiny: str | None = None
    back_default: str | None = None
    back_shiny: str | None = None

# Superset record shown in the detail view
class PokemonDetail(BaseModel):
    id: int | None
    name: str
    display_number: str
    # Upstream units: decimeters and hectograms
    height: int | None
    weight: int | None
    height_m: float | None
    weight_kg: float | None
    height_display: str
    weight_display: str
    base_experience: int | None
    types: list[str] = Field(default_factory=list)
    color: str
    stats: list[StatEntry] = Field(default_factory=list)
    abilities: list[Ability] = Field(default_factory=list)
    sprites: Sprites

# Descriptive fields sourced from the separate species endpoint
class SpeciesInfo(BaseModel):
    description: str = ""
    genus: str = ""
    habitat: str | None = None
    habitat_label: str | None = None

# Model for one page of the list view (Public Endpoint 1)
class PokemonPageResponse(BaseModel):
    page: int
    page_size: int
    total_pages: int
    count: int
    results: list[PokemonSummary]

# Model for the detail view (Public Endpoint 2)
class PokemonDetailResponse(BaseModel):
    pokemon: PokemonDetail
    species: SpeciesInfo
