"""
Core package: condition matching, definitions, transition table building
and the automaton engine.
"""
