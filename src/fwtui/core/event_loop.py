"""Merges the refresh timer and keyboard input into one event stream.

A single background task waits on whichever comes first: the next tick
deadline, the next key press or a change of the tick interval. Each of
these becomes exactly one queued event (interval changes only reschedule
the timer). The dashboard consumes events one at a time with
``await event_loop.next()``.

```
  KeyInputQueue ──┐
                  ├──> producer task ──> asyncio.Queue ──> next()
  tick deadline ──┤
                  │
  TickIntervalCell┘  (set_tick_interval)
```
"""

import asyncio
import contextlib
import logging
from dataclasses import dataclass

from fwtui.exceptions import EventLoopClosedError

from .keys import Key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TickEvent:
    """The refresh timer fired."""


@dataclass(frozen=True)
class InputEvent:
    """A key was pressed."""

    key: Key | str


Event = TickEvent | InputEvent


class KeyInputQueue:
    """
    Stream of key presses from the terminal.

    The TUI feeds keys as they arrive; the event loop reads them. Closing
    the queue ends the stream, which stops the event producer.
    """

    _CLOSED = object()

    def __init__(self) -> None:
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def feed(self, key: Key | str) -> None:
        if self._closed:
            logger.debug(f"Dropping key {key!r}: input closed")
            return
        self._queue.put_nowait(key)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(self._CLOSED)

    async def read(self) -> Key | str | None:
        """Wait for the next key; None once the stream is closed."""
        item = await self._queue.get()
        if item is self._CLOSED:
            return None
        return item


class TickIntervalCell:
    """Latest configured tick interval, watched by the producer.

    Only the most recent value matters, so repeated writes before the
    producer looks collapse into one change.
    """

    def __init__(self, seconds: float) -> None:
        self._value = seconds
        self._changed = asyncio.Event()

    @property
    def value(self) -> float:
        return self._value

    def set(self, seconds: float) -> None:
        self._value = seconds
        self._changed.set()

    async def changed(self) -> float:
        """Wait until the value is set, then return it."""
        await self._changed.wait()
        self._changed.clear()
        return self._value


class EventLoop:
    """
    Background producer of tick and input events.

    Example:
        ```python
        keys = KeyInputQueue()
        loop = EventLoop(keys)
        loop.run(tick_interval=1.0)

        event = await loop.next()  # TickEvent() right away
        ```
    """

    def __init__(self, input_source: KeyInputQueue) -> None:
        self._input = input_source
        self._events: asyncio.Queue[Event] = asyncio.Queue()
        self._interval: TickIntervalCell | None = None
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def tick_interval(self) -> float | None:
        return None if self._interval is None else self._interval.value

    def run(self, tick_interval: float) -> None:
        """
        Start the producer task on the running asyncio loop.

        The first tick is emitted immediately.

        Args:
            tick_interval: Seconds between two ticks

        Raises:
            RuntimeError: If the event loop was already started
        """
        if self._task is not None:
            raise RuntimeError("Event loop already started")

        self._interval = TickIntervalCell(tick_interval)
        self._task = asyncio.get_running_loop().create_task(
            self._produce(), name="fwtui-event-producer"
        )
        logger.info(f"Event loop started (tick interval {tick_interval}s)")

    def set_tick_interval(self, seconds: float) -> None:
        """Reschedule ticks: the next one fires one new period from now."""
        if self._interval is None:
            raise RuntimeError("Event loop not started")
        self._interval.set(seconds)

    async def next(self) -> Event:
        """
        Wait for the next event.

        Returns:
            The oldest pending event

        Raises:
            EventLoopClosedError: If the producer stopped and no event is pending
        """
        if not self._events.empty():
            return self._events.get_nowait()
        if self._task is None:
            raise EventLoopClosedError("event loop was never started")
        if self._task.done():
            raise EventLoopClosedError(self._termination_reason())

        get_task = asyncio.ensure_future(self._events.get())
        try:
            await asyncio.wait({get_task, self._task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            if not get_task.done():
                get_task.cancel()

        if get_task.done() and not get_task.cancelled():
            return get_task.result()
        if not self._events.empty():
            return self._events.get_nowait()
        raise EventLoopClosedError(self._termination_reason())

    async def stop(self) -> None:
        """Cancel the producer and wait for it to finish."""
        if self._task is None or self._task.done():
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        logger.info("Event loop stopped")

    # =================================================================
    # Producer
    # =================================================================

    async def _produce(self) -> None:
        assert self._interval is not None
        loop = asyncio.get_running_loop()
        period = self._interval.value
        deadline = loop.time()
        read_task: asyncio.Future | None = None
        change_task: asyncio.Future | None = None

        try:
            while True:
                if read_task is None:
                    read_task = asyncio.ensure_future(self._input.read())
                if change_task is None:
                    change_task = asyncio.ensure_future(self._interval.changed())

                timeout = max(0.0, deadline - loop.time())
                done, _ = await asyncio.wait(
                    {read_task, change_task},
                    timeout=timeout,
                    return_when=asyncio.FIRST_COMPLETED,
                )

                if change_task in done:
                    period = change_task.result()
                    change_task = None
                    deadline = loop.time() + period
                    logger.info(f"Tick interval changed to {period}s")

                if read_task in done:
                    key = read_task.result()
                    read_task = None
                    if key is None:
                        logger.info("Input stream closed, stopping event producer")
                        return
                    self._events.put_nowait(InputEvent(key))

                if loop.time() >= deadline:
                    self._events.put_nowait(TickEvent())
                    deadline += period
                    # After a stall, restart the schedule instead of catching up
                    if deadline <= loop.time():
                        deadline = loop.time() + period
        except Exception:
            logger.exception("Event producer failed")
            raise
        finally:
            for task in (read_task, change_task):
                if task is not None and not task.done():
                    task.cancel()

    def _termination_reason(self) -> str:
        assert self._task is not None
        if self._task.cancelled():
            return "event producer cancelled"
        error = self._task.exception()
        if error is not None:
            return f"event producer failed: {error}"
        return "input stream closed"
