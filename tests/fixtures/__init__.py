"""Test fixtures for xeon.

This package provides reusable test fixtures:
- scripts: action script builders, a temporary workspace, result recorders
- cli: console and settings fixtures for the command line
"""
