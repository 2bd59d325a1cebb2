# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from globstate.core.errors import DefinitionError, GlobStateError, LoadError, LoadErrorKind


def test_error_hierarchy():
    assert issubclass(LoadError, GlobStateError)
    assert issubclass(DefinitionError, GlobStateError)
    assert issubclass(GlobStateError, Exception)


def test_base_error_message_and_details():
    error = GlobStateError("Base error", {"key": "value"})
    assert str(error) == "Base error"
    assert error.message == "Base error"
    assert error.details == {"key": "value"}


def test_error_empty_messages():
    assert str(GlobStateError()) == ""
    assert GlobStateError().details == {}


def test_load_error_attributes():
    error = LoadError("State: X not found", LoadErrorKind.UNKNOWN_STATE, state="X")
    assert error.kind is LoadErrorKind.UNKNOWN_STATE
    assert error.state == "X"
    assert error.automaton is None
    assert error.details == {"kind": "UNKNOWN_STATE", "state": "X"}


def test_for_automaton_prefixes_name():
    error = LoadError("missing Start entry", LoadErrorKind.MISSING_START).for_automaton("dog")
    assert str(error) == "dog: missing Start entry"
    assert error.automaton == "dog"
    assert error.kind is LoadErrorKind.MISSING_START
    assert error.details["automaton"] == "dog"
