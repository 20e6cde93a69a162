import asyncio
import logging

from pokedex import config
from pokedex import mappers
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.models import PokemonDetail, SpeciesInfo

logger = logging.getLogger(__name__)

class DetailLoader:
    def __init__(self, poke_client: PokeAPIClient, language: str = config.DESCRIPTION_LANGUAGE):
        self._poke_client = poke_client
        self._language = language

    async def fetch_detail(self, name: str) -> tuple[PokemonDetail, SpeciesInfo]:
        """
        Fetches the full record and the species record for one Pokemon.

        Both requests are independent and run concurrently. Either failing raises
        the FetchError of that phase; the Pokemon phase wins if both fail.
        """
        logger.info(f"Loading detail for Pokemon: {name}")
        pokemon_data, species_data = await asyncio.gather(
            self._poke_client.get_pokemon(name),
            self._poke_client.get_pokemon_species(name),
            return_exceptions=True,
        )

        for result in (pokemon_data, species_data):
            if isinstance(result, BaseException):
                raise result

        return mappers.to_detail(pokemon_data), mappers.to_species(species_data, self._language)
