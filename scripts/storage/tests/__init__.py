"""Test suite for the todo storage layer.

This package contains tests for the SQLite data access layer, the database
location resolver, and the shared row types and error kinds.
"""
