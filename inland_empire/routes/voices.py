"""Narrative pass and ad hoc check endpoints."""

from fastapi import APIRouter, HTTPException, Request

from inland_empire.catalog import get_skill
from inland_empire.dice import roll_check
from inland_empire.voices import run_pass

from . import deps
from .models import CheckBody, MessageBody

router = APIRouter()


@router.post("/voices")
async def post_voices(request: Request, body: MessageBody):
    """Run one narrative pass over the message and return the voices that spoke.

    Passes are serialised; the psyche (including auto-detected statuses) is
    persisted afterwards.
    """
    async with request.app.state.lock:
        result = await run_pass(
            body.message,
            psyche=deps.psyche(request),
            settings=deps.settings(request),
            llm=deps.llm(request),
        )
        if result.detected_statuses:
            deps.persist(request)
    return result


@router.post("/check")
async def post_check(request: Request, body: CheckBody):
    """Roll one skill check. Defaults to the skill's current effective level."""
    if get_skill(body.skill_id) is None:
        raise HTTPException(404, "Skill not found")
    level = body.skill_level or deps.psyche(request).effective_level(body.skill_id)
    return roll_check(level, body.difficulty, body.modifier)
