# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

import uvicorn

from app.api import routes_customers, routes_health
from app.core.config import settings
from app.core.db import init_db

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app():
    app = FastAPI(title=settings.APP_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_health.router)
    app.include_router(routes_customers.router)

    @app.on_event("startup")
    def on_startup():
        init_db()
        logger.info("Application startup complete (env=%s)", settings.ENV)

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
