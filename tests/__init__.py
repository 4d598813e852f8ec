"""
Test suite for unitopia

Contains:
- tests/unit/          : Unit tests for individual modules
"""
