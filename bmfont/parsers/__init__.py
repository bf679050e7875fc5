"""Descriptor parsers and their shared error types."""
