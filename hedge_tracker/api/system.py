"""System API: health check and active engine defaults."""

from fastapi import APIRouter, Depends

from hedge_tracker.config import EngineConfig
from hedge_tracker.api.deps import get_engine_config

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/config")
def engine_config(config: EngineConfig = Depends(get_engine_config)):
    return config.model_dump()
