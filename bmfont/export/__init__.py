"""Font exporters."""
