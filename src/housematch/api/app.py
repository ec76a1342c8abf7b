# src/housematch/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance and mounts the routes; scoring logic lives in
`housematch.matching`.
"""

from __future__ import annotations

import os

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from housematch.config.settings import get_settings
from housematch.core.logging import configure_logging

from .routes import router

configure_logging()

app = FastAPI(title=f"{get_settings().app.name} API", version="0.1.0")

# CORS: comma-separated origins, e.g. HOUSEMATCH_CORS_ORIGINS="http://localhost:5173"
cors_origins = [s.strip() for s in os.getenv("HOUSEMATCH_CORS_ORIGINS", "").split(",") if s.strip()]
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(router)
