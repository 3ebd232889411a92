"""
Test suite for http-date-stamp

Contains:
- tests/unit/          : Unit tests for individual modules (incl. hypothesis properties)
"""
