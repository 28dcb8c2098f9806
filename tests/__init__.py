"""
Test suite for lvt

Contains:
- tests/unit/          : Unit tests for individual modules
"""
