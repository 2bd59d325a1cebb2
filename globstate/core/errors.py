# globstate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum, auto
from typing import Any, Dict, Optional


class GlobStateError(Exception):
    """
    Base exception class for errors raised by the automaton runtime.
    """

    def __init__(self, message: str = "", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LoadErrorKind(Enum):
    """
    Reasons an automaton definition can be rejected while building its
    transition table.
    """

    MISSING_START = auto()  # No start state given
    MISSING_STATES = auto()  # No states declared
    MISSING_TRANSITIONS = auto()  # No transitions declared
    INVALID_START = auto()  # Start state is not a declared state
    UNKNOWN_STATE = auto()  # A from-to key names an undeclared state


class LoadError(GlobStateError):
    """
    Raised when a definition cannot be turned into a transition table. Only
    ever raised at load time, never while processing events.
    """

    def __init__(
        self,
        message: str,
        kind: LoadErrorKind,
        automaton: Optional[str] = None,
        state: Optional[str] = None,
    ) -> None:
        details = {"kind": kind.name}
        if automaton is not None:
            details["automaton"] = automaton
        if state is not None:
            details["state"] = state
        super().__init__(message, details)
        self.kind = kind
        self.automaton = automaton
        self.state = state

    def for_automaton(self, name: str) -> "LoadError":
        """
        Return a copy of this error attributed to the named automaton, with the
        name prefixed to the message.
        """
        return LoadError(f"{name}: {self.message}", self.kind, automaton=name, state=self.state)


class DefinitionError(GlobStateError):
    """
    Raised when a deserialized definition tree or snapshot does not have the
    expected shape.
    """
