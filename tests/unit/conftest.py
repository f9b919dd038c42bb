"""Unit test fixtures.

Shared fixtures live in the root conftest.py. The validator is pure, so most
unit tests pass plain dicts and only the process-boundary adapters need the
environment patched.
"""
