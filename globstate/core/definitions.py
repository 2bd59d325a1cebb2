# globstate/core/definitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

from globstate.core.errors import DefinitionError


def _names(value: Any, where: str) -> Tuple[str, ...]:
    """
    Coerce an action list from the raw tree. An empty value means no actions.
    """
    if value is None or value == "":
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise DefinitionError(f"{where} must be a list of action names", {"value": value})
    return tuple(str(v) for v in value)


def _mapping(value: Any, where: str) -> Mapping[Any, Any]:
    if value is None or value == "":
        return {}
    if not isinstance(value, Mapping):
        raise DefinitionError(f"{where} must be a mapping", {"value": value})
    return value


@dataclass(frozen=True)
class StateDefinition:
    """Action names emitted when a state is entered or left."""

    entering: Tuple[str, ...] = ()
    leaving: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, raw: Any, where: str = "state") -> "StateDefinition":
        raw = _mapping(raw, where)
        return cls(
            entering=_names(raw.get("entering"), f"{where}.entering"),
            leaving=_names(raw.get("leaving"), f"{where}.leaving"),
        )


@dataclass(frozen=True)
class TransitionRule:
    """One rule under a from-to key: a condition and the actions it triggers."""

    when: str
    actions: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, raw: Any, where: str = "transition") -> "TransitionRule":
        raw = _mapping(raw, where)
        when = raw.get("when")
        return cls(
            when="" if when is None else str(when),
            actions=_names(raw.get("actions"), f"{where}.actions"),
        )


@dataclass(frozen=True)
class AutomatonDefinition:
    """
    The user-authored description of one automaton.

    ``transitions`` is keyed by a from-to key (``"A,B->C"``, ``"*->*"``,
    ``"A,B"``); see :func:`globstate.core.builder.expand_from_to`.
    Emptiness and state references are checked by the builder, not here.
    """

    start: str = ""
    states: Dict[str, StateDefinition] = field(default_factory=dict)
    transitions: Dict[str, List[TransitionRule]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Any) -> "AutomatonDefinition":
        """
        Build a definition from the loosely-typed tree produced by the YAML
        deserializer.

        :param raw: Mapping with ``start``, ``states`` and ``transitions`` keys.
        :raises DefinitionError: If a value has the wrong shape.
        """
        raw = _mapping(raw, "automaton")

        start = raw.get("start")
        states = {
            str(name): StateDefinition.from_mapping(value, f"states.{name}")
            for name, value in _mapping(raw.get("states"), "states").items()
        }

        transitions: Dict[str, List[TransitionRule]] = {}
        for key, rules in _mapping(raw.get("transitions"), "transitions").items():
            if rules is None or rules == "":
                rules = []
            if not isinstance(rules, list):
                raise DefinitionError(f"transitions.{key} must be a list of rules", {"value": rules})
            transitions[str(key)] = [
                TransitionRule.from_mapping(rule, f"transitions.{key}[{i}]") for i, rule in enumerate(rules)
            ]

        return cls(start="" if start is None else str(start), states=states, transitions=transitions)
