"""Health check and settings endpoints."""

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from inland_empire.config import update_settings as merge_settings

from . import deps

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings(request: Request):
    """Get the current settings."""
    return deps.settings(request)


@router.patch("/settings")
async def update_settings(request: Request, body: dict):
    """Update settings (partial merge). Invalid values leave the settings unchanged."""
    async with request.app.state.lock:
        try:
            updated = merge_settings(deps.settings(request), body)
        except ValidationError as e:
            raise HTTPException(422, e.errors(include_url=False, include_context=False))
        request.app.state.settings = updated
        deps.persist(request)
    return updated
