"""Outcome types for a single joke fetch and the state shown on screen."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Success:
    """The service answered with a non-empty joke."""

    kind: ClassVar[str] = "success"
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Success requires non-empty joke text")


@dataclass(frozen=True, slots=True)
class Empty:
    """Non-2xx status, missing body or empty joke text."""

    kind: ClassVar[str] = "empty"


@dataclass(frozen=True, slots=True)
class TransportError:
    """The request never produced a response (refused, reset, timed out)."""

    kind: ClassVar[str] = "transport_error"
    reason: str


@dataclass(frozen=True, slots=True)
class ParseError:
    """The body was not a JSON object carrying a string ``value``."""

    kind: ClassVar[str] = "parse_error"
    reason: str


FetchResult = Success | Empty | TransportError | ParseError


@dataclass(frozen=True, slots=True)
class JokeState:
    text: str = ""
    refreshing: bool = False
    last_result: str | None = None
