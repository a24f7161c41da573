"""
Test support utilities for salvage tests.

Helpers that are not fixtures but are shared across test files.
"""
