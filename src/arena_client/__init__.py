"""Typed async client for the Are.na API."""

from arena_client.api import ArenaClient, HttpError, PaginationAttributes

__all__ = ["ArenaClient", "HttpError", "PaginationAttributes"]
