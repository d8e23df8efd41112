from __future__ import annotations

import logging

from fastapi import FastAPI

from crash_game.api.sessions import router as sessions_router
from crash_game.runtime import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Crash Game API")
app.include_router(sessions_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
