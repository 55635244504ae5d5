"""
Root conftest.py - lets pytest import the package from a plain checkout.

Loaded before test collection, so the project root lands on sys.path.
"""
