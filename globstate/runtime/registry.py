# globstate/runtime/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Mapping

from globstate.core.automaton import Automaton
from globstate.persistence.snapshot import AutomatonSnapshot, Snapshot
from globstate.runtime.channels import Channel

logger = logging.getLogger(__name__)


class Registry:
    """
    A named collection of automata sharing one actions channel and one
    changes channel. Events are broadcast to every automaton.
    """

    def __init__(self, automata: Mapping[str, Automaton], actions: Channel, changes: Channel) -> None:
        """
        :param automata: Automata keyed by name, already wired to the channels.
        :param actions: Channel the automata emit actions into.
        :param changes: Channel the automata emit changes into.
        """
        self._automata: Dict[str, Automaton] = dict(automata)
        self._actions = actions
        self._changes = changes

    @property
    def actions(self) -> Channel:
        return self._actions

    @property
    def changes(self) -> Channel:
        return self._changes

    def process(self, event: Any) -> None:
        """
        Let every automaton process the event. There is no atomicity across
        automata: each one runs to completion in turn.
        """
        for automaton in self._automata.values():
            automaton.process(event)

    def persist(self) -> Snapshot:
        """Capture the current state name and entry time of every automaton."""
        return {name: AutomatonSnapshot(aut.state.name, aut.since) for name, aut in self._automata.items()}

    def restore(self, snapshot: Mapping[str, AutomatonSnapshot]) -> None:
        """
        Put automata back into previously persisted states.

        Entries for unknown automata are ignored. An entry naming a state the
        automaton does not have leaves that automaton as it was.
        """
        for name, entry in snapshot.items():
            automaton = self._automata.get(name)
            if automaton is None:
                continue
            if not automaton.set_state(entry.state, entry.since):
                logger.warning("%s: cannot restore unknown state %r", name, entry.state)

    def __getitem__(self, name: str) -> Automaton:
        return self._automata[name]

    def __contains__(self, name: object) -> bool:
        return name in self._automata

    def __iter__(self) -> Iterator[str]:
        return iter(self._automata)

    def __len__(self) -> int:
        return len(self._automata)

    def __str__(self) -> str:
        return ", ".join(f"{name}: {aut.state.name}" for name, aut in self._automata.items())
