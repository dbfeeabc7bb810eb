"""Screen state for the joke view and the refresh action that updates it."""

import asyncio
import logging
from typing import Callable

from joker.models import FetchResult, JokeState, Success
from joker.services.jokes import JokeClient

logger = logging.getLogger(__name__)

Observer = Callable[[JokeState], None]


class JokerViewModel:
    """Holds the joke on screen and refreshes it in the background.

    Failed or empty fetches leave the current text alone; only the loading
    flag changes. Observers are notified after every completed refresh.
    """

    def __init__(self, client: JokeClient) -> None:
        self._client = client
        self._text = ""
        self._last_result: str | None = None
        self._pending = 0
        self._observers: list[Observer] = []
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def state(self) -> JokeState:
        return JokeState(text=self._text, refreshing=self._pending > 0, last_result=self._last_result)

    @property
    def closed(self) -> bool:
        return self._closed

    def observe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def launch_refresh(self) -> asyncio.Task:
        """Start a refresh without waiting for it. Must run inside an event loop."""
        if self._closed:
            raise RuntimeError("View model is closed")
        task = asyncio.get_running_loop().create_task(self._refresh())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def request_new_joke(self) -> JokeState:
        return await self.launch_refresh()

    async def close(self) -> None:
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._observers.clear()

    async def _refresh(self) -> JokeState:
        self._pending += 1
        try:
            # The blocking request keeps running in its worker thread if cancelled; its result is dropped
            result = await asyncio.to_thread(self._client.fetch_joke)
        finally:
            self._pending -= 1
        self._apply(result)
        state = self.state
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                logger.exception("Joke state observer failed")
        return state

    def _apply(self, result: FetchResult) -> None:
        self._last_result = result.kind
        if isinstance(result, Success):
            self._text = result.text
        else:
            logger.debug("Keeping previous joke after %s", result.kind)
