"""Context analyzer: narrative text → five intensity axes.

Each axis owns a short list of indicator groups (one regex each). The axis
score is the fraction of its groups that match anywhere in the text, so it is
coverage in [0, 1], not a hit count. Stateless.
"""

from __future__ import annotations

import re

from inland_empire.models import NarrativeContext

_I = re.IGNORECASE

EMOTIONAL_INDICATORS = (
    re.compile(r"!{2,}"),
    re.compile(r"\?{2,}"),
    re.compile(r"scream|shout|cry|sob|laugh", _I),
    re.compile(r"furious|terrified|ecstatic|devastated", _I),
)

DANGER_INDICATORS = (
    re.compile(r"blood|wound|injury|hurt|pain", _I),
    re.compile(r"gun|knife|weapon|attack|fight", _I),
    re.compile(r"danger|threat|kill|die|death", _I),
)

SOCIAL_INDICATORS = (
    re.compile(r"lie|lying|truth|honest|trust", _I),
    re.compile(r"convince|persuade|manipulate", _I),
    re.compile(r"feel|emotion|sad|happy|angry", _I),
)

MYSTERY_INDICATORS = (
    re.compile(r"clue|evidence|investigate|discover", _I),
    re.compile(r"secret|hidden|mystery|strange", _I),
)

PHYSICAL_INDICATORS = (
    re.compile(r"room|building|street|place", _I),
    re.compile(r"cold|hot|wind|rain", _I),
    re.compile(r"machine|device|lock", _I),
)


def _coverage(indicators: tuple[re.Pattern[str], ...], text: str) -> float:
    return sum(1 for pattern in indicators if pattern.search(text)) / len(indicators)


def analyze(text: str) -> NarrativeContext:
    return NarrativeContext(
        message=text,
        emotional=_coverage(EMOTIONAL_INDICATORS, text),
        danger=_coverage(DANGER_INDICATORS, text),
        social=_coverage(SOCIAL_INDICATORS, text),
        mystery=_coverage(MYSTERY_INDICATORS, text),
        physical=_coverage(PHYSICAL_INDICATORS, text),
    )
