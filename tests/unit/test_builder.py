# tests/unit/test_builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Tests for from-to expansion and transition table construction."""

import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from globstate.core.builder import StateGraph, build, expand_from_to
from globstate.core.conditions import Condition
from globstate.core.definitions import AutomatonDefinition, StateDefinition, TransitionRule
from globstate.core.errors import LoadError, LoadErrorKind

STATES = ["A", "B", "C"]

state_names = st.lists(
    st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=8),
    min_size=1,
    max_size=6,
    unique=True,
)


# -----------------------------------------------------------------------------
# FROM-TO EXPANSION
# -----------------------------------------------------------------------------


def test_expand_bare_list_is_self_loops():
    assert expand_from_to("A,B", STATES) == [("A", "A"), ("B", "B")]


def test_expand_bare_star_is_every_self_loop():
    assert expand_from_to("*", STATES) == [("A", "A"), ("B", "B"), ("C", "C")]


def test_expand_arrow_is_cross_product():
    assert expand_from_to("A,B->C,A", STATES) == [("A", "C"), ("A", "A"), ("B", "C"), ("B", "A")]


def test_expand_star_on_one_side():
    assert expand_from_to("*->C", STATES) == [("A", "C"), ("B", "C"), ("C", "C")]
    assert expand_from_to("A->*", STATES) == [("A", "A"), ("A", "B"), ("A", "C")]


def test_expand_splits_on_first_arrow_only():
    assert expand_from_to("A->B->C", STATES) == [("A", "B->C")]


def test_expand_does_not_strip_whitespace():
    assert expand_from_to("A, B", STATES) == [("A", "A"), (" B", " B")]


@pytest.mark.property
@given(state_names)
def test_star_to_star_is_full_cross_product(names):
    assert expand_from_to("*->*", names) == list(itertools.product(names, names))


@pytest.mark.property
@given(state_names)
def test_explicit_list_matches_star(names):
    explicit = ",".join(names)
    assert expand_from_to(f"{explicit}->{explicit}", names) == expand_from_to("*->*", names)


# -----------------------------------------------------------------------------
# BUILD
# -----------------------------------------------------------------------------


def test_build_attaches_steps_to_sources(three_state_definition):
    graph = build(three_state_definition)

    assert isinstance(graph, StateGraph)
    assert graph.names() == ["A", "B", "C"]
    assert graph.start.name == "A"

    a = graph["A"]
    assert a.entering == ("enter_a",)
    assert a.leaving == ("leave_a",)
    assert {(s.condition.when, s.next) for s in a.steps} == {("go", "B"), ("stay", "A")}
    assert [s.next for s in graph["B"].steps] == ["C"]
    assert graph["C"].steps == ()


def test_build_keeps_rule_order_within_a_key():
    definition = AutomatonDefinition(
        start="A",
        states={"A": StateDefinition(), "B": StateDefinition()},
        transitions={
            "A,B->B": [
                TransitionRule(when="first", actions=("one",)),
                TransitionRule(when="second", actions=("two",)),
            ]
        },
    )
    graph = build(definition)
    for name in ("A", "B"):
        steps = graph[name].steps
        assert [s.condition for s in steps] == [Condition("first"), Condition("second")]
        assert [s.actions for s in steps] == [("one",), ("two",)]
        assert all(s.next == "B" for s in steps)


def test_build_star_reaches_every_state():
    definition = AutomatonDefinition(
        start="A",
        states={name: StateDefinition() for name in STATES},
        transitions={"*->*": [TransitionRule(when="x")]},
    )
    graph = build(definition)
    for name in STATES:
        assert [s.next for s in graph[name].steps] == STATES


def test_graph_is_read_only(three_state_definition):
    graph = build(three_state_definition)
    with pytest.raises(TypeError):
        graph.states["D"] = graph["A"]
    assert "D" not in graph
    assert len(graph) == 3


@pytest.mark.parametrize(
    "definition,kind",
    [
        (
            AutomatonDefinition(start="", states={"A": StateDefinition()}, transitions={"A": []}),
            LoadErrorKind.MISSING_START,
        ),
        (
            AutomatonDefinition(start="A", states={}, transitions={"A": []}),
            LoadErrorKind.MISSING_STATES,
        ),
        (
            AutomatonDefinition(start="A", states={"A": StateDefinition()}, transitions={}),
            LoadErrorKind.MISSING_TRANSITIONS,
        ),
        (
            AutomatonDefinition(start="Z", states={"A": StateDefinition()}, transitions={"A": []}),
            LoadErrorKind.INVALID_START,
        ),
        (
            AutomatonDefinition(start="A", states={"A": StateDefinition()}, transitions={"A->Z": []}),
            LoadErrorKind.UNKNOWN_STATE,
        ),
    ],
)
def test_build_errors(definition, kind):
    with pytest.raises(LoadError) as exc_info:
        build(definition)
    assert exc_info.value.kind is kind


def test_validation_order_first_violation_wins():
    with pytest.raises(LoadError) as exc_info:
        build(AutomatonDefinition())
    assert exc_info.value.kind is LoadErrorKind.MISSING_START

    with pytest.raises(LoadError) as exc_info:
        build(AutomatonDefinition(start="A"))
    assert exc_info.value.kind is LoadErrorKind.MISSING_STATES


def test_unknown_source_is_reported():
    definition = AutomatonDefinition(
        start="A", states={"A": StateDefinition()}, transitions={"Q->A": [TransitionRule(when="x")]}
    )
    with pytest.raises(LoadError) as exc_info:
        build(definition)
    assert exc_info.value.state == "Q"
    assert str(exc_info.value) == "State: Q not found"


def test_unknown_target_is_reported_by_target_name():
    definition = AutomatonDefinition(
        start="A", states={"A": StateDefinition()}, transitions={"A->Q": [TransitionRule(when="x")]}
    )
    with pytest.raises(LoadError) as exc_info:
        build(definition)
    assert exc_info.value.state == "Q"


def test_unknown_state_in_key_without_rules_still_fails():
    definition = AutomatonDefinition(start="A", states={"A": StateDefinition()}, transitions={"A,Q": []})
    with pytest.raises(LoadError) as exc_info:
        build(definition)
    assert exc_info.value.kind is LoadErrorKind.UNKNOWN_STATE
