"""Command-line entry point for the demo program."""
