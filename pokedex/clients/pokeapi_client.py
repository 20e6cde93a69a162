import httpx
from fastapi import HTTPException
import logging

from pokedex import config
from pokedex.models import PokemonReference

logger = logging.getLogger(__name__)

# Base class for every failure talking to PokeAPI
class FetchError(HTTPException):
    def __init__(self, status_code: int, detail: str, phase: str = "Pokemon"):
        super().__init__(status_code=status_code, detail=detail)
        self.phase = phase

class NetworkError(FetchError):
    """Request could not be sent or timed out."""
    def __init__(self, detail: str, phase: str = "Pokemon"):
        super().__init__(status_code=503, detail=detail, phase=phase)

class HttpStatusError(FetchError):
    """Upstream answered with a non-success status."""
    def __init__(self, upstream_status: int, phase: str = "Pokemon"):
        # Map an upstream 404 to a public 404, everything else to 503
        status_code = 404 if upstream_status == 404 else 503
        super().__init__(
            status_code=status_code,
            detail=f"Failed to fetch {phase}: {upstream_status}",
            phase=phase,
        )
        self.upstream_status = upstream_status

class MalformedDataError(FetchError):
    """Body was not JSON or a required field is missing."""
    def __init__(self, detail: str, phase: str = "Pokemon"):
        super().__init__(status_code=502, detail=detail, phase=phase)

class PokeAPIClient:
    BASE_URL = config.POKEAPI_BASE_URL

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.client = httpx.AsyncClient(
            base_url=base_url or self.BASE_URL,
            timeout=config.REQUEST_TIMEOUT if timeout is None else timeout,
        )

    async def _get_json(self, url: str, phase: str, params: dict | None = None) -> dict:
        """Performs a single GET and maps every failure to a FetchError."""
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"PokeAPI returned {e.response.status_code} for {phase} ({url})")
            raise HttpStatusError(e.response.status_code, phase=phase)

        except httpx.RequestError as e:
            # Handle network failures/timeouts
            logger.error(f"PokeAPI network error for {phase}: {str(e)}")
            raise NetworkError(f"Failed to fetch {phase}: network error ({str(e)})", phase=phase)

        except ValueError:
            logger.error(f"PokeAPI returned a non-JSON body for {phase} ({url})")
            raise MalformedDataError(f"Failed to fetch {phase}: response was not JSON", phase=phase)

    async def list_pokemon(self, limit: int) -> list[PokemonReference]:
        """Fetches up to `limit` references from the list endpoint."""
        data = await self._get_json("/pokemon", phase="Pokemon list", params={"limit": limit})

        results = data.get("results") if isinstance(data, dict) else None
        if results is None:
            raise MalformedDataError("Pokemon list response has no results", phase="Pokemon list")

        references = []
        for entry in results:
            if not entry.get("name"):
                raise MalformedDataError("Pokemon list entry has no name", phase="Pokemon list")
            references.append(PokemonReference(name=entry["name"], url=entry.get("url") or ""))

        logger.info(f"Fetched {len(references)} Pokemon references (limit={limit})")
        return references

    async def get_pokemon_at(self, url: str) -> dict:
        """Fetches a raw detail record from the locator carried by a reference."""
        return await self._get_json(url, phase="Pokemon")

    async def get_pokemon(self, name: str) -> dict:
        return await self._get_json(f"/pokemon/{name.lower()}", phase="Pokemon")

    async def get_pokemon_species(self, name: str) -> dict:
        return await self._get_json(f"/pokemon-species/{name.lower()}", phase="species")

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
