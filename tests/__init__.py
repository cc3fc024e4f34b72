"""
Test suite for mathlab

Contains:
- tests/unit/          : Unit tests, one module per source module
"""
