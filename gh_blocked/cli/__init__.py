"""Command line interface for gh-blocked."""
