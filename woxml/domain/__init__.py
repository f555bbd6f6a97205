"""Domain layer for woxml.

This layer contains the writer state machine and the pure helpers it
orchestrates. It is independent of concrete sinks, logging backends and
the command line.
"""
