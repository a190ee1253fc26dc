"""
Test suite for period-countdown

Contains:
- tests/unit/          : Unit tests for core math, domain models, contracts and board
"""
