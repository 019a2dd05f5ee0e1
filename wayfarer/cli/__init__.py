"""Command-line interface for Wayfarer."""
