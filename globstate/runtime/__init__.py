"""
Runtime package: shared output channels and the automata registry.
"""
