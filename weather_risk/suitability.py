"""Activity suitability rules over raw temperature (deg C) and wind (m/s).

All bounds are strict: a reading sitting exactly on a threshold is not
suitable. The one inclusive bound is ice skating's "at or below freezing".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from weather_risk.domain import ActivityTag, Observation

if TYPE_CHECKING:
    from weather_risk.activities import Activity


@dataclass(frozen=True)
class SuitabilityRule:
    """Threshold rule for one activity. Unset bounds are not checked."""
    temp_above: Optional[float] = None
    temp_below: Optional[float] = None
    temp_at_most: Optional[float] = None
    wind_below: Optional[float] = None
    never: bool = False

    def reasons(self, obs: Observation) -> List[str]:
        """Return why the rule fails for `obs`; empty when suitable."""
        if self.never:
            return ["No suitability rule for this activity"]

        temp = obs.temperature_c
        wind = obs.wind_speed_ms
        out: List[str] = []
        if self.temp_above is not None and not temp > self.temp_above:
            out.append(f"Too cold: {temp:.1f}C must be above {self.temp_above:.1f}C")
        if self.temp_below is not None and not temp < self.temp_below:
            out.append(f"Too hot: {temp:.1f}C must be below {self.temp_below:.1f}C")
        if self.temp_at_most is not None and not temp <= self.temp_at_most:
            out.append(f"Too warm: {temp:.1f}C must be at or below {self.temp_at_most:.1f}C")
        if self.wind_below is not None and not wind < self.wind_below:
            out.append(f"Too windy: {wind:.1f} m/s must be below {self.wind_below:.1f} m/s")
        return out

    def __call__(self, obs: Observation) -> bool:
        return not self.reasons(obs)


NEVER_SUITABLE = SuitabilityRule(never=True)

SUITABILITY_RULES: Dict[ActivityTag, SuitabilityRule] = {
    ActivityTag.WALKING: SuitabilityRule(temp_above=10, temp_below=35, wind_below=30),
    ActivityTag.PICNIC: SuitabilityRule(temp_above=15, temp_below=30),
    ActivityTag.FISHING: SuitabilityRule(temp_above=5),
    ActivityTag.ICE_SKATING: SuitabilityRule(temp_at_most=0),
    ActivityTag.SWIMMING: SuitabilityRule(temp_above=20, temp_below=35, wind_below=20),
    ActivityTag.CYCLING: SuitabilityRule(temp_above=10, temp_below=30, wind_below=25),
    ActivityTag.HIKING: SuitabilityRule(temp_above=5, temp_below=30, wind_below=30),
    ActivityTag.BEACH: SuitabilityRule(temp_above=25, temp_below=35, wind_below=20),
    ActivityTag.BARBECUE: SuitabilityRule(temp_above=15, temp_below=35),
    ActivityTag.SPORTS: NEVER_SUITABLE,
    ActivityTag.OTHER: NEVER_SUITABLE,
}


def is_suitable(activity: "Activity", obs: Observation) -> bool:
    """Pure function: True when `obs` satisfies the activity's rule."""
    return bool(activity.suitability_rule(obs))


def explain_suitability(activity: "Activity", obs: Observation) -> List[str]:
    """Reasons the activity is not advisable (empty list when it is)."""
    rule = activity.suitability_rule
    if isinstance(rule, SuitabilityRule):
        return rule.reasons(obs)
    return [] if rule(obs) else ["Conditions outside activity limits"]
