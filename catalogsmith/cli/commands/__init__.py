"""Subcommand implementations for the ``catalogsmith`` CLI."""
