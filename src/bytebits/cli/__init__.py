"""Command line interface for bytebits."""
