"""Command-line interface for textcell."""
