"""Application layer.

Ports that decouple the writer core from concrete sinks and loggers.
"""
