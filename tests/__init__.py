"""
Test suite for the complex value library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
