from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, status, HTTPException
from pokedex import config
from pokedex.dependencies import get_detail_loader, get_list_screen, shutdown
from pokedex.models import PokemonDetailResponse, PokemonPageResponse
from pokedex.pagination import Pager
from pokedex.screens import DetailScreen, ListScreen
from pokedex.services import DetailLoader
from pokedex.state import Failed, Idle, LoadState, Success


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    await shutdown()


app = FastAPI(
    title="Pokedex Browser API",
    description="Paginated Pokemon catalog and detail views backed by PokeAPI.",
    lifespan=lifespan,
)


def _ensure_success(state: LoadState, unavailable: str) -> Success:
    """Turns a settled screen state into either its data or an HTTP error."""
    if isinstance(state, Failed):
        raise HTTPException(status_code=state.status_code, detail=state.message)
    if not isinstance(state, Success):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=unavailable)
    return state


@app.get("/health", summary="Liveness probe")
async def health():
    return {"status": "healthy"}


# Endpoint 1: Paginated list view
@app.get(
    "/pokemon",
    response_model=PokemonPageResponse,
    summary="Returns one page of the Pokemon collection",
)
async def list_pokemon(
    page: int = 1,
    screen: ListScreen = Depends(get_list_screen),
):
    """Mounts the list screen on first use, waits for the collection and slices one page."""
    if isinstance(screen.state, Idle):
        screen.mount()
    _ensure_success(await screen.wait(), "Pokemon list is not available.")

    collection = screen.collection
    pager = Pager(collection, config.PAGE_SIZE)
    if not pager.go_to(page):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Page {page} is out of range (1-{pager.total_pages}).",
        )

    return PokemonPageResponse(
        page=pager.page,
        page_size=pager.page_size,
        total_pages=pager.total_pages,
        count=len(collection),
        results=pager.visible,
    )


@app.post(
    "/pokemon/refresh",
    status_code=status.HTTP_202_ACCEPTED,
    summary="Discards the collection and fetches it again from scratch",
)
async def refresh_pokemon(screen: ListScreen = Depends(get_list_screen)):
    # A fresh mount is the only way out of a failed list screen
    screen.remount()
    return {"status": "loading"}


# Endpoint 2: Detail view
@app.get(
    "/pokemon/{name}",
    response_model=PokemonDetailResponse,
    summary="Returns the detail view of one Pokemon",
)
async def get_pokemon_detail(
    name: str,
    loader: DetailLoader = Depends(get_detail_loader),
):
    """Fetches the Pokemon and its species record; the screen lives as long as the request."""
    screen = DetailScreen(loader)
    screen.mount(name)
    try:
        state = _ensure_success(await screen.wait(), f"Pokemon '{name}' could not be loaded.")
    finally:
        screen.unmount()

    detail, species = state.data
    return PokemonDetailResponse(pokemon=detail, species=species)
