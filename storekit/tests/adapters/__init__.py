"""Tests for adapter implementations.

Exercises the local adapters and the CLI command handler.
"""
