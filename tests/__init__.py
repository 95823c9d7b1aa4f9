"""
Test suite for quarter-series

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
