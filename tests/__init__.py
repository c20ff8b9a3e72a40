"""
Test suite for OmniInt

Contains:
- tests/unit/          : Unit and property tests for the arithmetic kernel and BigInteger
"""
