# globstate/core/automaton.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from globstate.core.builder import StateGraph
from globstate.core.states import Action, Change, State

if TYPE_CHECKING:
    from globstate.runtime.channels import Sink

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class Automaton:
    """
    One running state machine: its current state, the time it entered that
    state, and the shared sinks it emits actions and changes into.

    Not thread-safe. Callers must serialize ``process`` calls on the same
    instance.
    """

    def __init__(
        self,
        name: str,
        graph: StateGraph,
        actions: Sink,
        changes: Sink,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        :param name: Name reported in emitted changes.
        :param graph: The compiled states of this automaton.
        :param actions: Sink receiving :class:`Action` records.
        :param changes: Sink receiving :class:`Change` records.
        :param clock: Returns the current time in seconds. Defaults to ``time.time``.
        """
        self._name = name
        self._graph = graph
        self._actions = actions
        self._changes = changes
        self._clock = clock or time.time
        self._state = graph.start
        self._since = self._clock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def graph(self) -> StateGraph:
        return self._graph

    @property
    def state(self) -> State:
        """The current state."""
        return self._state

    @property
    def since(self) -> float:
        """When the current state was entered."""
        return self._since

    def set_state(self, name: str, since: float) -> bool:
        """
        Overwrite the current state and its entry time, as when restoring a
        snapshot.

        :return: False, leaving the automaton untouched, if ``name`` is not a
            state of this automaton.
        """
        state = self._graph.get(name)
        if state is None:
            return False
        self._state = state
        self._since = since
        return True

    def _emit(self, names: Iterable[str], event: Any) -> None:
        for name in names:
            self._actions.put(Action(name, event))

    def process(self, event: Any) -> None:
        """
        Feed one event to the automaton.

        The event is rendered with ``str()`` and tested against every step of
        the current state, in order. Each matching step emits the current
        state's leaving actions, its own actions, a :class:`Change` if it
        moves to another state, then the entering actions of the state now
        current. Every matching step fires, not only the first.
        """
        text = str(event)
        for step in self._state.steps:
            if not step.condition.match(text):
                continue
            self._emit(self._state.leaving, event)
            self._emit(step.actions, event)
            if step.next != self._state.name:
                old, old_since = self._state.name, self._since
                self._state = self._graph[step.next]
                self._since = self._clock()
                logger.debug("%s: %s -> %s on %r", self._name, old, step.next, text)
                self._changes.put(
                    Change(
                        automaton=self._name,
                        old=old,
                        new=step.next,
                        since=old_since,
                        duration=self._since - old_since,
                    )
                )
            self._emit(self._state.entering, event)

    def __repr__(self) -> str:
        return f"Automaton(name={self._name!r}, state={self._state.name!r})"
