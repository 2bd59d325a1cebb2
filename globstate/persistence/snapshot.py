# globstate/persistence/snapshot.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from globstate.core.errors import DefinitionError


@dataclass(frozen=True)
class AutomatonSnapshot:
    """Saved runtime state of one automaton."""

    state: str
    since: float


Snapshot = Dict[str, AutomatonSnapshot]


def snapshot_to_dict(snapshot: Mapping[str, AutomatonSnapshot]) -> Dict[str, Dict[str, Any]]:
    """
    Convert a snapshot to plain dicts, ready for the caller's own encoding.
    """
    return {name: asdict(entry) for name, entry in snapshot.items()}


def snapshot_from_dict(raw: Mapping[str, Any]) -> Snapshot:
    """
    Rebuild a snapshot from the output of :func:`snapshot_to_dict`.

    :raises DefinitionError: If an entry lacks ``state`` or ``since``.
    """
    snapshot: Snapshot = {}
    for name, entry in raw.items():
        try:
            snapshot[name] = AutomatonSnapshot(state=str(entry["state"]), since=float(entry["since"]))
        except (KeyError, TypeError, ValueError) as e:
            raise DefinitionError(f"{name}: invalid snapshot entry", {"entry": entry}) from e
    return snapshot
