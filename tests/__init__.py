"""
Test suite for freqdist

Contains:
- tests/unit/          : Unit tests for individual modules
"""
