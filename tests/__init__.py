"""
Test suite for Moneybag

Contains:
- tests/unit/          : Unit tests for individual modules
"""
