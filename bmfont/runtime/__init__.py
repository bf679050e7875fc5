"""Library-facing parse API and configuration loading."""
