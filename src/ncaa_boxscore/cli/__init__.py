"""Command-line interface for box-score queries."""
