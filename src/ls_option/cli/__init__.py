"""Command-line interface for ls-option."""
