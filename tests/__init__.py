"""
Test suite for numkit

Contains:
- tests/unit/          : Unit tests, one module per topic module
"""
