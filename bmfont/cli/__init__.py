"""Command implementations for the bmfont CLI."""
