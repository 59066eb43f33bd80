"""Command-line interface for arena_client."""
