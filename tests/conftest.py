# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class Recorder:
    """A sink that keeps everything put into it, in order."""

    def __init__(self) -> None:
        self.items = []

    def put(self, item) -> None:
        self.items.append(item)


@pytest.fixture
def clock():
    """A controllable time source."""
    return FakeClock()


@pytest.fixture
def recorder():
    """A single sink usable for both actions and changes."""
    return Recorder()


@pytest.fixture
def simple_path():
    """Path to the Hungry/Eating/Full example definition."""
    return FIXTURES / "simple.yaml"


@pytest.fixture
def simple_yaml(simple_path):
    return simple_path.read_bytes()


@pytest.fixture
def simple_registry(simple_yaml, clock):
    """The example registry driven by the fake clock."""
    from globstate.loader import load

    return load(simple_yaml, clock=clock)


@pytest.fixture
def three_state_definition():
    """A definition with A, B and C, usable for builder and engine tests."""
    from globstate.core.definitions import AutomatonDefinition, StateDefinition, TransitionRule

    return AutomatonDefinition(
        start="A",
        states={
            "A": StateDefinition(entering=("enter_a",), leaving=("leave_a",)),
            "B": StateDefinition(entering=("enter_b",), leaving=("leave_b",)),
            "C": StateDefinition(),
        },
        transitions={
            "A->B": [TransitionRule(when="go", actions=("step_ab",))],
            "A": [TransitionRule(when="stay", actions=("step_aa",))],
            "B->C": [TransitionRule(when="next.*", actions=())],
        },
    )
