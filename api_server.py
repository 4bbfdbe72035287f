from __future__ import annotations  # FastAPI server exposing interview scheduling

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router as interviews_router
from config.catalog import SchedulingCatalog, get_catalog
from config.settings import settings
from services.sessions import get_store
from storage.migrate import migrate


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:  # Prepare schema and warm the store
    migrate(settings.DB_PATH)
    store = get_store()
    logger.info("Loaded %d interviews from %s", len(store), settings.DB_PATH)
    yield


app = FastAPI(title="Interview Scheduling API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"]
)
app.include_router(interviews_router)


@app.get("/api/catalog", response_model=SchedulingCatalog)
def fetch_catalog() -> SchedulingCatalog:  # Form choices: roster, rounds, durations, types
    return get_catalog()


@app.get("/health")
def health() -> dict:  # Liveness probe
    return {"status": "ok"}
