from .models import Empty, FetchResult, JokeState, ParseError, Success, TransportError

__all__ = ["Empty", "FetchResult", "JokeState", "ParseError", "Success", "TransportError"]
