"""Inland Empire: an internal chorus of skill voices commenting on a narrative.

Each narrative message runs one pass: statuses are detected, the text is
scored on five intensity axes, a handful of the 24 skills (plus any ancient
voice an active status has woken) are selected, their checks are rolled on
2d6, and a text-completion service writes each voice's line.

Entry points: voices.run_pass() for a pass, app.create_app() for the HTTP API.
"""

from inland_empire.build import InvalidAllocation, create_build, default_build
from inland_empire.config import Settings
from inland_empire.llm import EchoLLM, HttpLLM, LLMError
from inland_empire.psyche import Psyche
from inland_empire.voices import plan_pass, run_pass

__all__ = [
    "EchoLLM",
    "HttpLLM",
    "InvalidAllocation",
    "LLMError",
    "Psyche",
    "Settings",
    "create_build",
    "default_build",
    "plan_pass",
    "run_pass",
]
