"""Build: attribute points → per-skill base levels and caps.

Every skill's base level equals its attribute's points. Caps are derived the
same way (starting = points + 1, learning = points + 4) and are advisory only.

create_build() accepts any positive allocation. The 12-point total is
enforced only by apply_allocation(), which is the one path that replaces a
live build; the default 3/3/3/3 build satisfies it.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone

from inland_empire.catalog import ATTRIBUTES
from inland_empire.models import Build, SkillCaps

logger = logging.getLogger(__name__)

ALLOCATION_TOTAL = 12
DEFAULT_BUILD_NAME = "Balanced Detective"
CUSTOM_BUILD_NAME = "Custom Build"
DEFAULT_ATTRIBUTE_POINTS: dict[str, int] = {
    "intellect": 3,
    "psyche": 3,
    "physique": 3,
    "motorics": 3,
}

STARTING_CAP_BONUS = 1
LEARNING_CAP_BONUS = 4


class InvalidAllocation(ValueError):
    """Raised when attribute points are malformed or do not total 12."""


def _check_points(attribute_points: Mapping[str, int]) -> None:
    unknown = set(attribute_points) - ATTRIBUTES.keys()
    if unknown:
        raise InvalidAllocation(f"Unknown attributes: {', '.join(sorted(unknown))}")
    missing = ATTRIBUTES.keys() - set(attribute_points)
    if missing:
        raise InvalidAllocation(f"Missing attributes: {', '.join(sorted(missing))}")
    for attr_id, points in attribute_points.items():
        if isinstance(points, bool) or not isinstance(points, int) or points < 1:
            raise InvalidAllocation(
                f"Attribute {attr_id!r} must have a positive integer of points, got {points!r}"
            )


def create_build(
    attribute_points: Mapping[str, int] | None = None,
    name: str = CUSTOM_BUILD_NAME,
) -> Build:
    """Derive a new Build from an attribute allocation."""
    points = dict(attribute_points or DEFAULT_ATTRIBUTE_POINTS)
    _check_points(points)

    skill_levels: dict[str, int] = {}
    skill_caps: dict[str, SkillCaps] = {}
    for attr_id, attr in ATTRIBUTES.items():
        attr_points = points[attr_id]
        for skill_id in attr.skills:
            skill_levels[skill_id] = attr_points
            skill_caps[skill_id] = SkillCaps(
                starting=attr_points + STARTING_CAP_BONUS,
                learning=attr_points + LEARNING_CAP_BONUS,
            )

    now = datetime.now(timezone.utc)
    return Build(
        id=f"build_{uuid.uuid4().hex[:12]}",
        name=name,
        attribute_points=points,
        skill_levels=skill_levels,
        skill_caps=skill_caps,
        created_at=now,
        modified_at=now,
    )


def default_build() -> Build:
    return create_build(DEFAULT_ATTRIBUTE_POINTS, DEFAULT_BUILD_NAME)


def validate_allocation(attribute_points: Mapping[str, int]) -> None:
    """Raise InvalidAllocation unless the points are well-formed and total 12."""
    _check_points(attribute_points)
    total = sum(attribute_points.values())
    if total != ALLOCATION_TOTAL:
        raise InvalidAllocation(
            f"Invalid attribute total: {total}, must be {ALLOCATION_TOTAL}"
        )


def apply_allocation(current: Build | None, attribute_points: Mapping[str, int]) -> Build:
    """Return the build that replaces `current`, keeping its name.

    `current` is never modified; on InvalidAllocation the caller still holds it.
    """
    validate_allocation(attribute_points)
    name = current.name if current is not None else CUSTOM_BUILD_NAME
    build = create_build(attribute_points, name)
    logger.info("Applied allocation %s to build %r", build.attribute_points, name)
    return build


def skill_level(build: Build, skill_id: str) -> int:
    """Base level of a skill in this build; unknown skills sit at 1."""
    return build.skill_levels.get(skill_id, 1)
