"""Command-line tools for pythermia."""
