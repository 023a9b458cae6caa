"""
Test suite for ecash-validation

Contains:
- tests/unit/          : Unit tests for codecs, contracts and validators
"""
