"""Parser for the line-oriented BMFont text format."""
