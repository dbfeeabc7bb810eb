from pydantic import BaseModel, ConfigDict


class JokeStateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    text: str
    refreshing: bool
    last_result: str | None = None


class HealthRead(BaseModel):
    status: str
    app: str
