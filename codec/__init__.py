"""Object to JSON and JSON to object conversion."""

from codec.json_codec import from_json, get_json

__all__ = ["from_json", "get_json"]
