"""Handlebars prompt rendering for voice commentary.

Each selected voice becomes one (system, user) prompt pair for the
text-completion service. The system prompt carries the voice's persona, the
point-of-view rule from settings, its effective level and status modifier,
the active statuses, and an instruction derived from the check outcome.
Ancient voices get a shorter, primal variant without level or check.

Templates use triple braces for free text so persona quotes are not
HTML-escaped.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pybars

from inland_empire.catalog import AncientVoice, Skill
from inland_empire.config import Settings
from inland_empire.models import CheckOutcome

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}

SCENE_LIMIT = 500


class PromptError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


# ── Custom Handlebars helpers ────────────────────────────


def _helper_signed(this, value):
    """{{signed n}} → "+1", "-2", "0"."""
    return f"{int(value):+d}" if value else "0"


_HELPERS: dict[str, Callable] = {
    "signed": _helper_signed,
}


def render_prompt(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context, helpers=_HELPERS))
    except Exception as e:
        raise PromptError(f"Template error: {e}") from e


# ── Templates ────────────────────────────────────────────

CHARACTER_CONTEXT_BLOCK = (
    "{{#if character_context}}\n"
    "IMPORTANT CONTEXT - WHOSE VOICE YOU ARE:\n"
    "{{{character_context}}}\n"
    "You are THIS character's internal voice, commenting on what THEY observe. "
    "Do NOT write from any NPC's perspective.\n"
    "{{/if}}"
)

VOICE_SYSTEM_TEMPLATE = (
    "{{{personality}}}\n\n"
    "You are an internal voice/skill in someone's mind during a roleplay scene. "
    "Be brief (1-3 sentences).\n"
    + CHARACTER_CONTEXT_BLOCK
    + "\nCRITICAL - POV RULES: {{{pov_instruction}}}\n\n"
    "Current skill level: {{skill_level}}/10"
    "{{#if status_modifier}} ({{signed status_modifier}} from status){{/if}}"
    "{{#if statuses}}\nCurrent state: {{{statuses}}}.{{/if}}\n"
    "{{{check_instruction}}}\n\n"
    "Respond ONLY with your commentary. No meta-text, no quotation marks around your response."
)

ANCIENT_SYSTEM_TEMPLATE = (
    "{{{personality}}}\n\n"
    "You are speaking from the deepest, oldest part of the mind. "
    "Be brief - short sentences, fragments even. Raw. Primal.\n"
    "{{{pov_instruction}}}\n"
    + CHARACTER_CONTEXT_BLOCK
    + "{{#if statuses}}\nCurrent state: {{{statuses}}}.{{/if}}\n"
    "Respond ONLY with your voice. No quotation marks."
)

USER_TEMPLATE = 'Scene: "{{{scene}}}"\nRespond as {{{signature}}}.'


# ── Context pieces ───────────────────────────────────────


def pov_instruction(settings: Settings) -> str:
    name = settings.character_name
    pronouns = settings.character_pronouns
    if settings.pov_style == "third":
        subject = name or "the character"
        return (
            f"Write in THIRD PERSON about {subject}. Use \"{name or pronouns}\" and "
            f"\"{pronouns}/them\" - NEVER \"you\" or \"your\". Example: "
            f"\"{name or 'They'} should be careful here\" NOT \"You should be careful.\""
        )
    if settings.pov_style == "first":
        return (
            "Write in FIRST PERSON as if you ARE the character's inner voice speaking to "
            "themselves. Use \"I\", \"me\", \"my\" - NEVER \"you\". Example: "
            "\"I notice something wrong\" NOT \"You notice something.\""
        )
    return (
        "Write in SECOND PERSON addressing the character. Use \"you\" and \"your\". "
        "Example: \"You notice something off about this.\""
    )


def ancient_pov_instruction(settings: Settings) -> str:
    if settings.pov_style == "third":
        return f"Refer to {settings.character_name or 'the host'} in third person."
    if settings.pov_style == "first":
        return "Speak as primal urges in first person fragments."
    return 'Address the host as "you".'


def check_instruction(check: CheckOutcome | None) -> str:
    if check is None:
        return ""
    if check.success:
        if check.is_boxcars:
            return "CRITICAL SUCCESS - Be brilliant and profound."
        return "Check passed. Notice something relevant."
    if check.is_snake_eyes:
        return "CRITICAL FAILURE - Be hilariously wrong or misguided."
    return "Check failed. Be less insightful or slightly off."


# ── Prompt pairs ─────────────────────────────────────────


def build_voice_prompt(
    voice: Skill | AncientVoice,
    scene: str,
    settings: Settings,
    *,
    skill_level: int,
    status_modifier: int = 0,
    status_names: list[str] | None = None,
    check: CheckOutcome | None = None,
) -> tuple[str, str]:
    """Return (system_prompt, user_prompt) for one voice."""
    statuses = ", ".join(status_names or [])
    ctx: dict[str, Any] = {
        "personality": voice.personality,
        "character_context": settings.character_context.strip(),
        "statuses": statuses,
    }
    if isinstance(voice, AncientVoice):
        ctx["pov_instruction"] = ancient_pov_instruction(settings)
        system = render_prompt(ANCIENT_SYSTEM_TEMPLATE, ctx)
    else:
        ctx.update(
            pov_instruction=pov_instruction(settings),
            skill_level=skill_level,
            status_modifier=status_modifier,
            check_instruction=check_instruction(check),
        )
        system = render_prompt(VOICE_SYSTEM_TEMPLATE, ctx)

    user = render_prompt(USER_TEMPLATE, {
        "scene": scene[:SCENE_LIMIT],
        "signature": voice.signature,
    })
    return system, user
