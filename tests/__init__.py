"""
Test suite for digitkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
