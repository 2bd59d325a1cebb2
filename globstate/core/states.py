# globstate/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from globstate.core.conditions import Condition


@dataclass(frozen=True)
class Step:
    """
    A compiled transition rule attached to a source state: when the condition
    matches, emit the actions and move to ``next``.
    """

    condition: Condition
    actions: Tuple[str, ...]
    next: str


@dataclass(frozen=True)
class State:
    """
    A runtime state. Built once by the transition table builder and shared,
    read-only, by the automaton that owns the graph.
    """

    name: str
    entering: Tuple[str, ...] = ()
    leaving: Tuple[str, ...] = ()
    steps: Tuple[Step, ...] = ()


@dataclass(frozen=True)
class Action:
    """
    A named side effect for the host to carry out, with the event that
    triggered it.
    """

    name: str
    trigger: Any = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Change:
    """
    Record of a completed state transition.

    :ivar since: Timestamp at which the old state was entered.
    :ivar duration: Seconds spent in the old state.
    """

    automaton: str
    old: str
    new: str
    since: float
    duration: float
