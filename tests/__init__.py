"""
Test suite for amm-quoting-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
