"""Command-line interface for ionrpc."""
