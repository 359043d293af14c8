"""Command-line interface for TASKLANE."""
