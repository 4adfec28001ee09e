"""Voice pass: runs one narrative message end-to-end.

Pass flow:
  1. Skip when disabled or the message is shorter than 10 characters.
  2. Detect statuses in the message and absorb them (auto_detect_status).
  3. Analyze the message into a NarrativeContext.
  4. Select voices (ancient first, then regular, then minimum fill).
  5. Decide and roll a check for every regular voice at its effective level.
     Ancient voices are never checked.
  6. Request commentary for each voice in order, one at a time.
     A failed request degrades only that voice to "*static*".
  7. Drop voices whose check failed unless show_failed_checks.

Steps 1-5 are synchronous and exposed as plan_pass(); run_pass() adds the
commentary calls.
"""

from __future__ import annotations

import logging

from inland_empire.catalog import get_ancient_voice, get_skill
from inland_empire.config import Settings
from inland_empire.context import analyze
from inland_empire.dice import decide_check, roll_check
from inland_empire.llm import LLM, LLMError
from inland_empire.models import (
    NarrativeContext,
    PassResult,
    PlannedVoice,
    VoiceResult,
)
from inland_empire.prompts import PromptError, build_voice_prompt
from inland_empire.psyche import Psyche
from inland_empire.rng import RandomSource, default_rng
from inland_empire.selector import select_voices
from inland_empire.status import detect_statuses

logger = logging.getLogger(__name__)

MIN_MESSAGE_LENGTH = 10
STATIC_PLACEHOLDER = "*static*"


def should_skip(message: str, settings: Settings) -> bool:
    return not settings.enabled or len(message.strip()) < MIN_MESSAGE_LENGTH


def plan_pass(
    message: str,
    psyche: Psyche,
    settings: Settings,
    rng: RandomSource | None = None,
) -> tuple[NarrativeContext, list[str], list[PlannedVoice]]:
    """Detect, analyze, select and roll. Returns (context, newly detected, planned voices).

    Mutates psyche.statuses when auto-detection adds a status.
    """
    rng = rng or default_rng()

    detected: list[str] = []
    if settings.auto_detect_status:
        detected = psyche.statuses.absorb(detect_statuses(message))
        if detected:
            logger.info("Detected statuses: %s", ", ".join(detected))

    context = analyze(message)
    selections = select_voices(
        context,
        psyche.build,
        psyche.statuses,
        min_voices=settings.min_voices,
        max_voices=settings.max_voices,
        rng=rng,
    )

    difficulty_modifier = psyche.statuses.difficulty_modifier()
    planned: list[PlannedVoice] = []
    for selection in selections:
        if selection.is_ancient:
            planned.append(PlannedVoice(selection=selection))
            continue
        decision = decide_check(selection, context, rng, difficulty_modifier)
        check = None
        if decision.should_check:
            check = roll_check(selection.skill_level, decision.difficulty, rng=rng)
        planned.append(PlannedVoice(selection=selection, check=check))

    return context, detected, planned


async def generate_commentary(
    planned: list[PlannedVoice],
    message: str,
    psyche: Psyche,
    settings: Settings,
    llm: LLM,
) -> list[VoiceResult]:
    """Request commentary for each planned voice sequentially, in order."""
    status_names = psyche.statuses.names()
    results: list[VoiceResult] = []

    for item in planned:
        selection = item.selection
        voice = (
            get_ancient_voice(selection.skill_id)
            if selection.is_ancient
            else get_skill(selection.skill_id)
        )
        if voice is None:
            logger.warning("No catalog entry for selected voice %r: skipped", selection.skill_id)
            continue

        error: str | None = None
        try:
            system, user = build_voice_prompt(
                voice,
                message,
                settings,
                skill_level=selection.skill_level,
                status_modifier=(
                    0 if selection.is_ancient
                    else psyche.statuses.modifier_for(selection.skill_id)
                ),
                status_names=status_names,
                check=item.check,
            )
            content = (await llm(selection.skill_id, system, user)).strip()
            if not content:
                raise LLMError("Empty content from LLM backend")
        except (LLMError, PromptError) as e:
            logger.warning("Voice %s degraded: %s", selection.skill_id, e)
            content = STATIC_PLACEHOLDER
            error = str(e)
        except Exception as e:
            logger.warning("Voice %s degraded: %s", selection.skill_id, e, exc_info=True)
            content = STATIC_PLACEHOLDER
            error = str(e)

        results.append(VoiceResult(
            skill_id=selection.skill_id,
            skill_name=selection.skill_name,
            signature=voice.signature,
            color=voice.color,
            content=content,
            score=selection.score,
            check=item.check,
            is_ancient=selection.is_ancient,
            success=error is None,
            error=error,
        ))

    return results


async def run_pass(
    message: str,
    *,
    psyche: Psyche,
    settings: Settings,
    llm: LLM,
    rng: RandomSource | None = None,
) -> PassResult:
    """Execute one narrative pass and return the voices to present."""
    if should_skip(message, settings):
        return PassResult(message=message, skipped=True)

    context, detected, planned = plan_pass(message, psyche, settings, rng)
    voices = await generate_commentary(planned, message, psyche, settings, llm)

    if not settings.show_failed_checks:
        voices = [v for v in voices if v.check is None or v.check.success]

    logger.debug("Pass produced %d voice(s)", len(voices))
    return PassResult(
        message=message,
        context=context,
        detected_statuses=detected,
        voices=voices,
    )
