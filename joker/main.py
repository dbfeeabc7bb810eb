from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from joker import schemas
from joker.config import settings
from joker.core.log import configure_logging
from joker.dependencies import get_joke_client
from joker.routers import jokes
from joker.services.jokes import JokeClient
from joker.services.view_model import JokerViewModel

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


def create_app(client: JokeClient | None = None, fetch_on_startup: bool | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    if fetch_on_startup is None:
        fetch_on_startup = settings.fetch_on_startup
    view_model = JokerViewModel(client or get_joke_client())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if fetch_on_startup:
            view_model.launch_refresh()
        yield
        await view_model.close()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.view_model = view_model

    if PUBLIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=PUBLIC_DIR), name="static")

        @app.get("/", include_in_schema=False)
        def serve_index():
            return FileResponse(PUBLIC_DIR / "index.html")

    app.include_router(jokes.router)

    @app.get("/health", response_model=schemas.HealthRead)
    def health():
        return {"status": "ok", "app": settings.app_name}

    return app


app = create_app()
