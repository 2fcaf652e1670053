import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.exceptions import register_exception_handlers
from core.logging import setup_logging
from core.security import security
from routers import (
    quiz as quiz_router,
    words as words_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s starting", settings.PROJECT_NAME)
    yield
    logger.info("%s stopped", settings.PROJECT_NAME)


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    security.handle_errors(app)
    register_exception_handlers(app)

    origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(words_router.router)
    app.include_router(quiz_router.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", reload=True, host="127.0.0.1", port=8000)
