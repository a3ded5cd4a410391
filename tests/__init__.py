"""
Test suite for rational-fraction

Contains:
- tests/unit/          : Unit tests for individual modules
"""
