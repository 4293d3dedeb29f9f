"""Command line interface for irlens."""
