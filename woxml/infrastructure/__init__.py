"""Infrastructure layer.

Concrete sinks and logging adapters for the ports in
woxml.application.ports.
"""
