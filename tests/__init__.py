"""Test suite for color3.

Test Structure:
- unit/: Unit tests per core area (colors, calendar, aggregation,
  submissions, config, utils) and the CLI
- conftest.py: Shared fixtures (reference date, mappings, submissions)
"""
