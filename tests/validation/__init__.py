"""Validation test suite for XML well-formedness.

This package checks that writer output parses with a standard XML parser
and that escaped content survives the round trip unchanged.
"""
