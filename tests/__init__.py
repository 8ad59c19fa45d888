"""
Tests for the sprie spell checker.
"""
