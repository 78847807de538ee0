"""
Test suite for numext

Contains:
- tests/unit/          : Unit tests for individual modules
"""
