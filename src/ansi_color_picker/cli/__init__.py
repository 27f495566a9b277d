"""Command-line interface and interactive picker session."""
