"""
Relay server: forwards browser-originated issue requests to Jira and GitHub.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config.settings import RELAY_SETTINGS
from .routes import router

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    app = FastAPI(title="Jira Story Assistant Relay")

    app.include_router(prefix="/api", router=router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app

app = create_app()

def run(host: str = None, port: int = None) -> None:
    import uvicorn

    host = host or RELAY_SETTINGS["host"]
    port = port or RELAY_SETTINGS["port"]
    logger.info(f"Jira proxy server running on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)
