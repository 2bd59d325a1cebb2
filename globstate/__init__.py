"""globstate: finite state machines driven by glob-matched events

Automata are declared in YAML with a compact from-to grammar for
transitions. Each automaton tracks its current state and the time it
entered it; events are rendered to text and matched against glob-style
conditions, and the resulting actions and state changes are emitted onto
two bounded channels shared by every automaton of a registry.

Interactions:
    - Host code feeds events through Registry.process or Automaton.process
    - Host code drains Registry.actions and Registry.changes
    - Host code persists Registry.persist() however it likes

Cross-cutting Concerns:
    Thread Safety:
        - Channels are thread-safe and block producers when full
        - Automata are not; serialize process() calls per automaton

    Error Handling:
        - LoadError and DefinitionError at load time only
        - Event processing never raises

    Logging:
        - Standard library logging, no handlers installed
"""

from globstate.core.automaton import Automaton
from globstate.core.builder import StateGraph, build, expand_from_to
from globstate.core.conditions import Condition, match_condition
from globstate.core.definitions import AutomatonDefinition, StateDefinition, TransitionRule
from globstate.core.errors import DefinitionError, GlobStateError, LoadError, LoadErrorKind
from globstate.core.states import Action, Change, State, Step
from globstate.loader import load, load_file
from globstate.persistence.snapshot import AutomatonSnapshot, snapshot_from_dict, snapshot_to_dict
from globstate.runtime.channels import Channel, drain
from globstate.runtime.registry import Registry

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Automaton",
    "AutomatonDefinition",
    "AutomatonSnapshot",
    "Change",
    "Channel",
    "Condition",
    "DefinitionError",
    "GlobStateError",
    "LoadError",
    "LoadErrorKind",
    "Registry",
    "State",
    "StateDefinition",
    "StateGraph",
    "Step",
    "TransitionRule",
    "build",
    "drain",
    "expand_from_to",
    "load",
    "load_file",
    "match_condition",
    "snapshot_from_dict",
    "snapshot_to_dict",
]
