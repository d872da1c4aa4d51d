from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core.config import Settings
from core.db import Database
from core.errors import register_error_handlers
from core.logs import configure_logging
from realstate import ports
from realstate import router as realstate_router
from realstate.repository import RealStateRepository
from realstate.service import RealStateService


def create_app(
    settings: Settings | None = None,
    *,
    service: ports.RealStateService | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    database: Database | None = None
    if service is None:
        database = Database(settings.database)
        service = RealStateService(RealStateRepository(database))

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Open the DB pool once per process, unless a service was injected.
        if database is not None:
            await database.connect()
        try:
            yield
        finally:
            if database is not None:
                await database.close()

    app = FastAPI(title="realstate-api", lifespan=lifespan)
    app.state.settings = settings
    app.state.realstate_service = service

    register_error_handlers(app)
    app.include_router(realstate_router.router, tags=["realstate"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


def run(settings: Settings | None = None) -> None:
    settings = settings or Settings.from_env()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
    )


app = create_app()


if __name__ == "__main__":
    run()
