"""
Test suite for sigfig

Contains:
- tests/unit/          : Unit tests for individual modules
"""
