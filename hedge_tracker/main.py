"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hedge_tracker.config import settings
from hedge_tracker.utils.logging import setup_logging
from hedge_tracker.api import dashboard, pairs, risk, system, trades


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    setup_logging()
    yield


app = FastAPI(
    title="Hedge Tracker",
    description="Hedge pair PnL, volume and liquidation risk calculations",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(system.router)
app.include_router(trades.router)
app.include_router(pairs.router)
app.include_router(dashboard.router)
app.include_router(risk.router)
