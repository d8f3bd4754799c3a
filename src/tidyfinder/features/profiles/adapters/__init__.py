"""Adapters persisting profiles as JSON."""

from .json_store import JsonProfileExchange, JsonProfileStore

__all__ = ["JsonProfileExchange", "JsonProfileStore"]
