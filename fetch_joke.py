"""Simple helper to fetch a random joke from the Chuck Norris joke API."""

import sys

from joker.config import settings
from joker.core.http import build_session
from joker.core.log import configure_logging
from joker.models import Success
from joker.services.jokes import JokeClient


def main() -> int:
    configure_logging(settings.log_level)
    client = JokeClient(
        endpoint_url=settings.joke_api_url,
        session=build_session(settings),
        timeout_seconds=settings.request_timeout_seconds,
    )
    result = client.fetch_joke()
    if isinstance(result, Success):
        print(result.text)
        return 0
    print(f"No joke available ({result.kind})", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
