"""Command-line interface for rfc4291."""
