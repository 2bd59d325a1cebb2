# globstate/core/builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Transition table construction.

From-to keys use a compact grammar:

- ``"A,B"`` expands to the self-loops ``A->A`` and ``B->B``
- ``"A,B->C,D"`` expands to the cross product ``A->C, A->D, B->C, B->D``
- ``"*"`` on either side stands for every declared state

Every rule declared under a key is attached, in order, to each expanded
source state.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from globstate.core.conditions import Condition
from globstate.core.definitions import AutomatonDefinition
from globstate.core.errors import LoadError, LoadErrorKind
from globstate.core.states import State, Step

WILDCARD = "*"
ARROW = "->"


class StateGraph:
    """
    The immutable set of states built for one automaton. Steps refer to their
    targets by name and are resolved through this graph.
    """

    def __init__(self, start: str, states: Mapping[str, State]) -> None:
        self._start = start
        self._states = MappingProxyType(dict(states))

    @property
    def start(self) -> State:
        """The initial state."""
        return self._states[self._start]

    @property
    def states(self) -> Mapping[str, State]:
        """Read-only view of the states, keyed by name, in declaration order."""
        return self._states

    def names(self) -> List[str]:
        return list(self._states)

    def get(self, name: str) -> Optional[State]:
        return self._states.get(name)

    def __getitem__(self, name: str) -> State:
        return self._states[name]

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)


def _side(text: str, all_states: Sequence[str]) -> List[str]:
    if text == WILDCARD:
        return list(all_states)
    return text.split(",")


def expand_from_to(key: str, all_states: Sequence[str]) -> List[Tuple[str, str]]:
    """
    Expand a from-to key into its ``(from, to)`` pairs. Names are not checked.

    :param key: Key such as ``"A,B->C"``, ``"*->*"`` or ``"A,B"``.
    :param all_states: Declared state names, substituted for ``*``.
    :return: Pairs in left-major order.
    """
    left, arrow, right = key.partition(ARROW)
    froms = _side(left, all_states)
    if not arrow:
        return [(f, f) for f in froms]
    tos = _side(right, all_states)
    return [(f, t) for f in froms for t in tos]


def build(definition: AutomatonDefinition) -> StateGraph:
    """
    Validate a definition and compile it into a state graph.

    Checks run in a fixed order and the first failure wins.

    :param definition: The automaton definition.
    :return: The state graph, with every state's steps attached.
    :raises LoadError: If the definition is incomplete or references an
        undeclared state.
    """
    if not definition.start:
        raise LoadError("missing Start entry", LoadErrorKind.MISSING_START)
    if not definition.states:
        raise LoadError("missing States entries", LoadErrorKind.MISSING_STATES)
    if not definition.transitions:
        raise LoadError("missing Transitions entries", LoadErrorKind.MISSING_TRANSITIONS)

    all_states = list(definition.states)
    steps: Dict[str, List[Step]] = {name: [] for name in all_states}

    if definition.start not in steps:
        raise LoadError("starting State invalid", LoadErrorKind.INVALID_START, state=definition.start)

    for key, rules in definition.transitions.items():
        for source, target in expand_from_to(key, all_states):
            for name in (source, target):
                if name not in steps:
                    raise LoadError(f"State: {name} not found", LoadErrorKind.UNKNOWN_STATE, state=name)
            for rule in rules:
                steps[source].append(Step(Condition(rule.when), rule.actions, target))

    states = {
        name: State(name=name, entering=sd.entering, leaving=sd.leaving, steps=tuple(steps[name]))
        for name, sd in definition.states.items()
    }
    return StateGraph(definition.start, states)
