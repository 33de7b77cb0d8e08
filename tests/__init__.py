"""
Test suite for eelevels

Contains:
- tests/unit/          : Unit tests for individual modules
"""
