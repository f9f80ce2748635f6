"""Command-line interface for appleseed."""
