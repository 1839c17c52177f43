"""Command-line interface for uuidbytes."""
