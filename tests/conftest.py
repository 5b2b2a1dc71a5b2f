"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on the import path so `tests.unit.line_test_utils`
resolves.
"""
