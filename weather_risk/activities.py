"""Static activity profile table: baseline risk weights plus a suitability rule.

Built once at import and never mutated. Unknown tags resolve to the hiking
baseline with ``fallback=True`` and a rule that is never satisfied.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Dict, Union

from weather_risk.domain import ActivityTag, Observation, RiskScores
from weather_risk.suitability import NEVER_SUITABLE, SUITABILITY_RULES
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="activities")

FALLBACK_TAG = ActivityTag.HIKING


@dataclass(frozen=True)
class Activity:
    """A named outdoor-activity profile."""
    tag: ActivityTag
    baseline: RiskScores
    suitability_rule: Callable[[Observation], bool]
    fallback: bool = False


# hiking, fishing, beach, picnic and sports carry the dashboard's original
# weights; the remaining tags were added alongside their suitability rules.
ACTIVITY_BASELINES: Dict[ActivityTag, RiskScores] = {
    ActivityTag.HIKING: RiskScores(hot=45, cold=25, windy=35, wet=40, uncomfortable=30),
    ActivityTag.FISHING: RiskScores(hot=30, cold=20, windy=50, wet=60, uncomfortable=25),
    ActivityTag.BEACH: RiskScores(hot=70, cold=10, windy=40, wet=20, uncomfortable=65),
    ActivityTag.PICNIC: RiskScores(hot=40, cold=30, windy=25, wet=35, uncomfortable=35),
    ActivityTag.SPORTS: RiskScores(hot=55, cold=20, windy=45, wet=30, uncomfortable=50),
    ActivityTag.WALKING: RiskScores(hot=35, cold=25, windy=30, wet=35, uncomfortable=25),
    ActivityTag.CYCLING: RiskScores(hot=45, cold=25, windy=55, wet=40, uncomfortable=35),
    ActivityTag.BARBECUE: RiskScores(hot=50, cold=20, windy=35, wet=45, uncomfortable=40),
    ActivityTag.ICE_SKATING: RiskScores(hot=5, cold=70, windy=35, wet=25, uncomfortable=40),
    ActivityTag.SWIMMING: RiskScores(hot=60, cold=30, windy=30, wet=15, uncomfortable=45),
    ActivityTag.OTHER: RiskScores(hot=45, cold=25, windy=35, wet=40, uncomfortable=30),
}


def _build_profiles() -> Dict[ActivityTag, Activity]:
    missing = [t for t in ActivityTag if t not in ACTIVITY_BASELINES or t not in SUITABILITY_RULES]
    if missing:
        raise RuntimeError(f"Activity table incomplete for: {', '.join(t.value for t in missing)}")
    return {
        tag: Activity(tag=tag, baseline=ACTIVITY_BASELINES[tag], suitability_rule=SUITABILITY_RULES[tag])
        for tag in ActivityTag
    }


ACTIVITY_PROFILES: Dict[ActivityTag, Activity] = _build_profiles()

_TAGS_BY_LOWER = {tag.value.lower(): tag for tag in ActivityTag}


def resolve_activity(tag: Union[str, ActivityTag, None]) -> Activity:
    """Look up an activity profile by tag (case-insensitive)."""
    if isinstance(tag, ActivityTag):
        return ACTIVITY_PROFILES[tag]

    key = (tag or "").strip().lower().replace("_", "").replace("-", "").replace(" ", "")
    resolved = _TAGS_BY_LOWER.get(key)
    if resolved is not None:
        return ACTIVITY_PROFILES[resolved]

    logger.info(f"Unknown activity tag {tag!r}; falling back to {FALLBACK_TAG.value} baseline")
    return dataclasses.replace(
        ACTIVITY_PROFILES[FALLBACK_TAG],
        suitability_rule=NEVER_SUITABLE,
        fallback=True,
    )
