# -*- coding: utf-8 -*-
"""
MetaBalance API

Weight-management backend: meal and fasting tracking, daily wins, progress
reports, AI coaching and the four-phase journey program.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .app_db import init_app_db
from .dates import utc_now_iso
from .achievements.api import router as achievements_router
from .auth.api import router as auth_router
from .auth.security import get_current_user_from_request
from .chat.api import router as chat_router
from .emotional.api import router as emotional_router
from .fasting.api import router as fasting_router
from .food.api import router as food_router
from .goals.api import router as goals_router
from .insights.api import router as insights_router
from .journey.api import blood_work_router, fasting_router as journey_fasting_router
from .journey.api import router as journey_router, supplements_router as journey_supplements_router
from .journey.catalog import seed_journey_supplements
from .meals.api import router as meals_router
from .mindfulness.api import router as mindfulness_router
from .mindfulness.catalog import seed_exercises
from .profile.api import router as profile_router
from .progress.api import router as progress_router
from .reflections.api import router as reflections_router
from .research.api import router as research_router
from .supplements.api import router as supplements_router
from .water.api import router as water_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

VERSION = "1.0.0"

app = FastAPI(
    title="MetaBalance",
    description="Metabolic health and weight-management tracking with AI coaching",
    version=VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _prepare_storage() -> None:
    init_app_db(settings.app_db_path)
    seed_journey_supplements()
    seed_exercises()


@app.on_event("startup")
def _startup_init_db() -> None:
    _prepare_storage()


# Some test clients skip lifespan events.
_prepare_storage()


_AUTH_EXEMPT_PREFIXES = (
    "/api/auth/login",
    "/api/auth/register",
    "/api/docs",
    "/api/redoc",
    "/api/openapi.json",
)

# readable without signing in, GET only
_PUBLIC_READ_PREFIXES = ("/api/mindfulness/exercises",)


def _is_exempt(request: Request) -> bool:
    path = request.url.path
    if not path.startswith("/api") or path == "/api/health":
        return True
    if any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        return True
    return request.method == "GET" and any(path.startswith(p) for p in _PUBLIC_READ_PREFIXES)


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    if not _is_exempt(request):
        try:
            request.state.user = get_current_user_from_request(request)
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    return await call_next(request)


app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(meals_router)
app.include_router(food_router)
app.include_router(fasting_router)
app.include_router(supplements_router)
app.include_router(progress_router)
app.include_router(insights_router)
app.include_router(chat_router)
app.include_router(research_router)
app.include_router(goals_router)
app.include_router(water_router)
app.include_router(reflections_router)
app.include_router(achievements_router)
app.include_router(journey_router)
app.include_router(journey_supplements_router)
app.include_router(journey_fasting_router)
app.include_router(blood_work_router)
app.include_router(emotional_router)
app.include_router(mindfulness_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": VERSION, "timestamp": utc_now_iso()}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    host = os.environ.get("METABALANCE_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("METABALANCE_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        log.warning("invalid port %r, falling back to 8000", port_raw)
        port = 8000

    uvicorn.run("metabalance.api:app", host=host, port=port, reload=False)
