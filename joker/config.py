from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Joker"
    joke_api_url: str = "https://api.chucknorris.io/jokes/random"
    # No upstream timeout is defined by the joke service; a timeout counts as a transport failure
    request_timeout_seconds: float = 10.0
    cache_enabled: bool = True
    cache_size_bytes: int = 1024 * 1024
    log_level: str = "INFO"
    fetch_on_startup: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="JOKER_")


settings = Settings()
