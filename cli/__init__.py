"""Command line interface for SGDNet."""
