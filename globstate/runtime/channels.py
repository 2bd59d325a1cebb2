# globstate/runtime/channels.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import queue
from typing import Any, List, Protocol, runtime_checkable

DEFAULT_CAPACITY = 32


@runtime_checkable
class Sink(Protocol):
    """
    Anything the automaton can emit records into.

    Runtime Invariants:
    - ``put`` preserves the order of calls made from one thread.
    - ``put`` may block; it must not drop items.
    """

    def put(self, item: Any) -> None:
        """Append an item, blocking if there is no room."""
        ...


class Channel(queue.Queue):
    """
    Bounded FIFO shared by every automaton of a registry. ``put`` blocks while
    the channel is full, which is the only backpressure on producers.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """
        :param capacity: Maximum number of queued items. Must be positive.
        """
        if capacity <= 0:
            raise ValueError("Channel capacity must be positive")
        super().__init__(maxsize=capacity)

    @property
    def capacity(self) -> int:
        return self.maxsize


def drain(channel: "queue.Queue[Any]") -> List[Any]:
    """
    Remove and return everything currently queued, without blocking.
    """
    items = []
    while True:
        try:
            items.append(channel.get_nowait())
        except queue.Empty:
            return items
