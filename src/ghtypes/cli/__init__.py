"""Command-line interface for ghtypes."""
