from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from users_api.config import get_settings
from users_api.observability.metrics import get_metrics
from users_api.store.memory import UserStore, get_user_store


router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def metrics(store: UserStore = Depends(get_user_store)) -> dict:
    settings = get_settings()
    if not settings.enable_metrics_endpoint:
        raise HTTPException(status_code=404, detail="Not found")
    snapshot = get_metrics().snapshot()
    snapshot["users"] = {"stored": store.count()}
    return snapshot
