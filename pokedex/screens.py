"""
Screen lifecycles for the list and detail views.

A screen owns at most one load task at a time. Mounting starts it, unmounting
cancels it, and a result that arrives for a superseded or unmounted screen is
dropped instead of being written into state.
"""
import asyncio
import logging

from pokedex import config
from pokedex.clients.pokeapi_client import FetchError
from pokedex.models import PokemonDetail, PokemonSummary, SpeciesInfo
from pokedex.services.collection_fetcher import CollectionFetcher
from pokedex.services.detail_loader import DetailLoader
from pokedex.state import Failed, Idle, LoadState, Loading, Success

logger = logging.getLogger(__name__)


class Screen:
    def __init__(self):
        self._state: LoadState = Idle()
        self._task: asyncio.Task | None = None
        self._mounted = False
        self._generation = 0

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def _load(self, *args):
        raise NotImplementedError

    def mount(self, *args) -> None:
        """Enters loading and starts the load task. Must run inside an event loop."""
        self.unmount()
        self._generation += 1
        self._mounted = True
        self._state = Loading()
        self._task = asyncio.create_task(self._run(self._generation, *args))

    def unmount(self) -> None:
        self._mounted = False
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._state = Idle()

    def remount(self, *args) -> None:
        self.unmount()
        self.mount(*args)

    async def wait(self) -> LoadState:
        """Waits until the current mount settles and returns the resulting state."""
        while isinstance(self._state, Loading) and self._task is not None:
            task = self._task
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                # Only swallow the cancellation of the load task itself
                if not task.cancelled():
                    raise
            if task is self._task and task.done():
                break
        return self._state

    async def _run(self, generation: int, *args) -> None:
        try:
            data = await self._load(*args)
        except FetchError as e:
            logger.error(f"{type(self).__name__} failed to load: {e.detail}")
            state = Failed(message=e.detail, status_code=e.status_code)
        except Exception:
            logger.exception(f"{type(self).__name__} hit an unexpected error while loading")
            state = Failed(message="Unexpected error while loading Pokemon data.")
        else:
            state = Success(data)
        self._settle(generation, state)

    def _settle(self, generation: int, state: LoadState) -> None:
        if not self._mounted or generation != self._generation:
            logger.debug(f"{type(self).__name__} discarded a result for a stale mount")
            return
        self._state = state


class ListScreen(Screen):
    def __init__(self, fetcher: CollectionFetcher, limit: int = config.FETCH_LIMIT):
        super().__init__()
        self._fetcher = fetcher
        self.limit = limit

    async def _load(self) -> list[PokemonSummary]:
        # Rebuilt from scratch on every mount
        return await self._fetcher.fetch_collection(self.limit)

    @property
    def collection(self) -> list[PokemonSummary]:
        if isinstance(self._state, Success):
            return self._state.data
        return []


class DetailScreen(Screen):
    def __init__(self, loader: DetailLoader):
        super().__init__()
        self._loader = loader
        self.name: str | None = None

    def mount(self, name: str | None = None) -> None:
        self.name = name or None
        if self.name is None:
            # Nothing to load without a name
            self.unmount()
            return
        super().mount(self.name)

    def show(self, name: str | None) -> None:
        """Switches to another Pokemon; reloads only when the name changes."""
        if self._mounted and name == self.name:
            return
        self.mount(name)

    async def _load(self, name: str) -> tuple[PokemonDetail, SpeciesInfo]:
        return await self._loader.fetch_detail(name)

    @property
    def detail(self) -> PokemonDetail | None:
        return self._state.data[0] if isinstance(self._state, Success) else None

    @property
    def species(self) -> SpeciesInfo | None:
        return self._state.data[1] if isinstance(self._state, Success) else None
