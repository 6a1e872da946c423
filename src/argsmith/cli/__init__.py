"""Command-line interface for argsmith."""
