"""Test suite for validkit.

- unit/: Unit tests for validators, locale catalogs and the ambient stack
"""
