# globstate/loader.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Load automata from a YAML document.

The document maps automaton names to definitions::

    dog:
      start: Hungry
      states:
        Hungry: {}
        Eating:
          entering: ["eat('apple')"]
      transitions:
        Hungry->Eating:
          - when: food.*
            actions: ["woof()"]
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from globstate.core.automaton import Automaton, Clock
from globstate.core.builder import build
from globstate.core.definitions import AutomatonDefinition
from globstate.core.errors import DefinitionError, LoadError
from globstate.runtime.channels import DEFAULT_CAPACITY, Channel
from globstate.runtime.registry import Registry

logger = logging.getLogger(__name__)


def load(data: Union[bytes, str], capacity: int = DEFAULT_CAPACITY, clock: Optional[Clock] = None) -> Registry:
    """
    Build a registry from a YAML document.

    :param data: The YAML text.
    :param capacity: Size of each of the two shared output channels.
    :param clock: Time source for the automata. Defaults to ``time.time``.
    :return: A registry with every automaton in its start state.
    :raises yaml.YAMLError: If the document cannot be parsed.
    :raises DefinitionError: If the document does not have the expected shape.
    :raises LoadError: If any automaton is invalid. Nothing is loaded then.
    """
    # Every scalar stays a string: On, yes and 1 are names, not bool or int
    raw = yaml.load(data, Loader=yaml.BaseLoader)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise DefinitionError("automata document must be a mapping of names to definitions")

    actions = Channel(capacity)
    changes = Channel(capacity)
    automata: Dict[str, Automaton] = {}
    for name, value in raw.items():
        name = str(name)
        try:
            graph = build(AutomatonDefinition.from_mapping(value))
        except LoadError as e:
            raise e.for_automaton(name) from e
        except DefinitionError as e:
            raise DefinitionError(f"{name}: {e.message}", e.details) from e
        automata[name] = Automaton(name, graph, actions, changes, clock=clock)
        logger.debug(
            "Loaded automaton %s: %d states, starting in %s",
            name,
            len(graph),
            graph.start.name,
        )

    return Registry(automata, actions, changes)


def load_file(
    path: Union[str, "os.PathLike[str]"],
    capacity: int = DEFAULT_CAPACITY,
    clock: Optional[Clock] = None,
) -> Registry:
    """
    Read a YAML file and build a registry from it. Read errors propagate as-is.
    """
    return load(Path(path).read_bytes(), capacity=capacity, clock=clock)
