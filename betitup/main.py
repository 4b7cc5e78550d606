# betitup/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import get_settings
from .core.logging import configure_logging
from .routers import health, odds, parlay, picks

settings = get_settings()
configure_logging(settings.log_level, settings.log_format)

app = FastAPI(title="BetItUp API", version="0.1.0")

# CORS for every route
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "HEAD", "OPTIONS"],
    allow_headers=["*"],
)

# Routers
app.include_router(health.router)
app.include_router(odds.router)
app.include_router(picks.router)
app.include_router(parlay.router)
