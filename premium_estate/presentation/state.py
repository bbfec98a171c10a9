# premium_estate/presentation/state.py
"""
Observable UI state shared by the list and detail holders.

A holder owns one immutable state snapshot and replaces it on every
transition. Observers either register a callback (`subscribe`) or iterate
`states()`; both start with the current snapshot. Consecutive equal
snapshots are not re-published.

Each fetch runs as its own asyncio.Task on the running loop. In-flight
fetches are never cancelled. With `drop_stale` on, every fetch takes a
monotonic request id and only the latest one may publish its result;
otherwise the last completion wins. After `close()` completions are ignored
and new fetches are refused with RuntimeError. A listener that raises is
logged and does not keep the other observers from the snapshot.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Any, AsyncIterator, Awaitable, Callable, Generic, TypeVar

from ..config import settings
from ..domain.errors import ListingsError
from ..domain.result import Result

log = logging.getLogger(__name__)

S = TypeVar("S")

Listener = Callable[[Any], None]

_CLOSED = object()


class StateHolder(Generic[S]):
    def __init__(self, initial: S, *, drop_stale: bool | None = None) -> None:
        self._state = initial
        self._listeners: list[Listener] = []
        self._queues: set[asyncio.Queue] = set()
        self._tasks: set[asyncio.Task] = set()
        self._request_seq = 0
        self._closed = False
        self.drop_stale = settings.DROP_STALE_RESPONSES if drop_stale is None else bool(drop_stale)

    @property
    def state(self) -> S:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` now and on every transition. Returns an unsubscribe callable."""
        self._listeners.append(listener)
        _notify(listener, self._state)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def states(self) -> AsyncIterator[S]:
        """Async stream of snapshots; ends when the holder is closed."""
        queue: asyncio.Queue = asyncio.Queue()
        queue.put_nowait(self._state)
        if self._closed:
            queue.put_nowait(_CLOSED)
        self._queues.add(queue)
        try:
            while True:
                item = await queue.get()
                if item is _CLOSED:
                    return
                yield item
        finally:
            self._queues.discard(queue)

    def close(self) -> None:
        """Tear down: stop publishing. Running fetches finish and are discarded."""
        if self._closed:
            return
        self._closed = True
        self._listeners.clear()
        for q in self._queues:
            q.put_nowait(_CLOSED)

    async def join(self) -> None:
        """Wait until no fetch is in flight."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _set_state(self, new: S) -> None:
        if self._closed or new == self._state:
            return
        self._state = new
        for listener in list(self._listeners):
            _notify(listener, new)
        for q in self._queues:
            q.put_nowait(new)

    def _launch(
        self,
        fetch: Callable[[], Awaitable[Result[Any]]],
        on_result: Callable[[S, Result[Any]], S],
    ) -> asyncio.Task:
        if self._closed:
            raise RuntimeError("state holder is closed")
        loop = asyncio.get_running_loop()

        self._request_seq += 1
        request_id = self._request_seq
        task = loop.create_task(self._run(request_id, fetch, on_result))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        # the task does not start before this returns, so loading is published first
        self._set_state(replace(self._state, is_loading=True, error=None))  # type: ignore[type-var]
        return task

    async def _run(
        self,
        request_id: int,
        fetch: Callable[[], Awaitable[Result[Any]]],
        on_result: Callable[[S, Result[Any]], S],
    ) -> None:
        try:
            result = await fetch()
        except Exception as e:
            log.exception("fetch #%d raised", request_id)
            result = Result.failure(ListingsError(str(e)))

        if self._closed:
            log.debug("fetch #%d finished after close; discarded", request_id)
            return
        if self.drop_stale and request_id != self._request_seq:
            log.debug("fetch #%d superseded by #%d; discarded", request_id, self._request_seq)
            return

        self._set_state(on_result(self._state, result))


def _notify(listener: Listener, state: Any) -> None:
    try:
        listener(state)
    except Exception:
        log.exception("state listener %r failed", listener)
