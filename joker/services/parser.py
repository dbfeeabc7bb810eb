import json
from typing import Callable

ResponseParser = Callable[[str], str]


class JokeParseError(ValueError):
    """Raised when a response body does not carry a joke."""


def parse_joke(body: str) -> str:
    """Return the string stored under ``"value"`` in a JSON object body."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise JokeParseError(f"Body is not valid JSON: {exc.msg}") from exc
    except RecursionError as exc:
        raise JokeParseError("Body is nested too deeply") from exc
    if not isinstance(data, dict):
        raise JokeParseError(f"Expected a JSON object, got {type(data).__name__}")
    if "value" not in data:
        raise JokeParseError("Missing 'value' key")
    value = data["value"]
    if not isinstance(value, str):
        raise JokeParseError(f"'value' must be a string, got {type(value).__name__}")
    return value
