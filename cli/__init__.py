"""xeon command-line interface.

This package is the presentation layer: argument parsing (app), colored
console output (output), subcommand handlers (handlers), and runtime
configuration (settings).
"""
