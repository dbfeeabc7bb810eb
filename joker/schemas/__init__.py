from .schemas import HealthRead, JokeStateRead

__all__ = ["HealthRead", "JokeStateRead"]
