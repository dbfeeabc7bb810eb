"""Fetch a random joke from the joke service."""

import logging

import requests

from joker.config import settings
from joker.core.http import build_session
from joker.models import Empty, FetchResult, ParseError, Success, TransportError
from joker.services.parser import ResponseParser, parse_joke

logger = logging.getLogger(__name__)

API_URL = "https://api.chucknorris.io/jokes/random"


class JokeClient:
    """One GET per call against a fixed endpoint, decoded into a ``FetchResult``.

    The client holds no per-call state, so a single instance can be shared
    between threads.
    """

    def __init__(
        self,
        endpoint_url: str = API_URL,
        session: requests.Session | None = None,
        parser: ResponseParser = parse_joke,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._session = session or build_session(settings)
        self._parser = parser
        self._timeout_seconds = timeout_seconds

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def fetch_joke(self) -> FetchResult:
        try:
            response = self._session.get(self._endpoint_url, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            logger.warning("Joke request to %s failed: %s", self._endpoint_url, exc)
            return TransportError(str(exc) or type(exc).__name__)

        if not 200 <= response.status_code < 300:
            logger.debug("Joke service answered %s, ignoring body", response.status_code)
            return Empty()

        body = _read_body(response)
        if not body:
            logger.debug("Joke service answered without a readable body")
            return Empty()

        try:
            text = self._parser(body)
        except ValueError as exc:
            logger.warning("Could not parse joke response: %s", exc)
            return ParseError(str(exc))

        if not text:
            logger.debug("Joke service returned empty joke text")
            return Empty()

        logger.info("Fetched joke (%d chars, cached=%s)", len(text), getattr(response, "from_cache", False))
        return Success(text)


def _read_body(response: requests.Response) -> str | None:
    raw = response.content
    if not raw:
        return None
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
