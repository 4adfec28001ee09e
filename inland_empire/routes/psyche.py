"""Catalog, build and status endpoints."""

from fastapi import APIRouter, HTTPException, Request

from inland_empire.build import InvalidAllocation
from inland_empire.catalog import (
    ANCIENT_VOICES,
    ATTRIBUTES,
    DIFFICULTIES,
    SKILLS,
    STATUS_EFFECTS,
)
from inland_empire.status import detect_statuses

from . import deps
from .models import BuildBody, MessageBody

router = APIRouter()


def _psyche_view(request: Request) -> dict:
    psyche = deps.psyche(request)
    return {
        "build": psyche.build,
        "effective_levels": psyche.effective_levels(),
        "active_statuses": list(psyche.statuses.active),
        "ancient_voices": sorted(psyche.statuses.active_ancient_voices()),
        "difficulty_modifier": psyche.statuses.difficulty_modifier(),
    }


@router.get("/catalog")
async def get_catalog():
    """Static game data: attributes, skills, ancient voices, statuses, difficulties."""
    return {
        "attributes": list(ATTRIBUTES.values()),
        "skills": list(SKILLS.values()),
        "ancient_voices": list(ANCIENT_VOICES.values()),
        "status_effects": list(STATUS_EFFECTS.values()),
        "difficulties": list(DIFFICULTIES.values()),
    }


@router.get("/psyche")
async def get_psyche(request: Request):
    """Current build, effective skill levels and active statuses."""
    return _psyche_view(request)


@router.put("/build")
async def put_build(request: Request, body: BuildBody):
    """Replace the build from a 12-point attribute allocation."""
    async with request.app.state.lock:
        psyche = deps.psyche(request)
        try:
            build = psyche.apply_allocation(body.attribute_points)
        except InvalidAllocation as e:
            raise HTTPException(400, str(e))
        if body.name:
            psyche.build = build.model_copy(update={"name": body.name})
        deps.persist(request)
    return _psyche_view(request)


@router.post("/statuses/{status_id}/toggle")
async def toggle_status(request: Request, status_id: str):
    """Toggle one status on or off."""
    if status_id not in STATUS_EFFECTS:
        raise HTTPException(404, "Status not found")
    async with request.app.state.lock:
        active = deps.psyche(request).statuses.toggle(status_id)
        deps.persist(request)
    return {"id": status_id, "active": active, **_psyche_view(request)}


@router.delete("/statuses")
async def clear_statuses(request: Request):
    """Deactivate every status."""
    async with request.app.state.lock:
        deps.psyche(request).statuses.clear()
        deps.persist(request)
    return _psyche_view(request)


@router.post("/detect")
async def detect(body: MessageBody):
    """Statuses the text would trigger. Does not change state."""
    detected = detect_statuses(body.message)
    return {"statuses": [s for s in STATUS_EFFECTS if s in detected]}
