"""
Persistence package: in-memory snapshots of automaton runtime state.
"""
