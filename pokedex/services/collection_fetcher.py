import asyncio
import logging

from pokedex import config
from pokedex import mappers
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.models import PokemonSummary

logger = logging.getLogger(__name__)

class CollectionFetcher:
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def fetch_collection(self, limit: int = config.FETCH_LIMIT) -> list[PokemonSummary]:
        """
        Two-phase fetch: the list of references, then every detail record concurrently.

        The call settles only once every detail request has settled. Any failure
        aborts the whole collection; the summaries keep the list endpoint's order.
        """
        references = await self._poke_client.list_pokemon(limit)

        # Issue every request before awaiting any; gather returns results by index
        responses = await asyncio.gather(
            *(self._poke_client.get_pokemon_at(ref.url) for ref in references),
            return_exceptions=True,
        )

        failures = [r for r in responses if isinstance(r, BaseException)]
        if failures:
            logger.error(f"{len(failures)} of {len(references)} detail requests failed; discarding collection")
            raise failures[0]

        collection = [mappers.to_summary(raw) for raw in responses]
        logger.info(f"Collection ready with {len(collection)} Pokemon")
        return collection
