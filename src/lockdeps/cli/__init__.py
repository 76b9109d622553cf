"""Command-line interface for lockdeps."""
