"""Pokedex browser: a paginated catalog and detail view over PokeAPI."""
