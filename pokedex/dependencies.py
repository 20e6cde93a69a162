from pokedex.clients import PokeAPIClient
from pokedex.screens import ListScreen
from pokedex.services import CollectionFetcher, DetailLoader
from fastapi import Depends

_poke_client = None
_list_screen = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_collection_fetcher(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> CollectionFetcher:
    return CollectionFetcher(poke_client=poke_client)

def get_detail_loader(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> DetailLoader:
    return DetailLoader(poke_client=poke_client)

def get_list_screen(
    fetcher: CollectionFetcher = Depends(get_collection_fetcher),
) -> ListScreen:
    # One list screen per process; mounted lazily by the first request
    global _list_screen
    if _list_screen is None:
        _list_screen = ListScreen(fetcher=fetcher)
    return _list_screen

async def shutdown():
    """Unmount the list screen and close the upstream client."""
    global _poke_client, _list_screen
    if _list_screen is not None:
        _list_screen.unmount()
        _list_screen = None
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None
