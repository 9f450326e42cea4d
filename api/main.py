from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import config, db
from core.errors import register_error_handlers
from core.logging import configure_logging
from people import router as people_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to requests through `db.get_connection`.
    app.state.pool = await db.create_pool()
    try:
        if config.init_schema_enabled():
            await db.init_schema(app.state.pool)
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


def create_app() -> FastAPI:
    config.load_env()
    configure_logging()

    app = FastAPI(title="People API", lifespan=lifespan)
    register_error_handlers(app)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    app.include_router(people_router.router, tags=["people"])
    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=config.api_host(), port=config.api_port())


if __name__ == "__main__":
    run()
