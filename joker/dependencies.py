from functools import lru_cache

import requests
from fastapi import Request

from joker.config import Settings, settings
from joker.core.http import build_session
from joker.services.jokes import JokeClient
from joker.services.view_model import JokerViewModel


def get_settings() -> Settings:
    return settings


@lru_cache
def get_session() -> requests.Session:
    return build_session(get_settings())


@lru_cache
def get_joke_client() -> JokeClient:
    current = get_settings()
    return JokeClient(
        endpoint_url=current.joke_api_url,
        session=get_session(),
        timeout_seconds=current.request_timeout_seconds,
    )


def get_view_model(request: Request) -> JokerViewModel:
    return request.app.state.view_model
