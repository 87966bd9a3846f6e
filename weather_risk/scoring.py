"""Risk scoring: turn an observation or a baseline profile into five 0-100 scores.

Two explicit entry points:

- score_from_observation: deterministic, driven by live measurements.
- score_from_baseline: simulated, an activity baseline jittered by a uniform
  random offset per axis.

Callers pick the path; nothing here infers it.
"""

from __future__ import annotations

import math
import random
from typing import Mapping

from weather_risk.domain import ConditionCode, Observation, RiskScores

RISK_AXES = ("hot", "cold", "windy", "wet", "uncomfortable")

HOT_CEILING_C = 40.0
COLD_THRESHOLD_C = 15.0
WIND_CEILING_MS = 15.0
DRY_WET_FACTOR = 0.3
DEFAULT_JITTER = 15.0


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and round half-up to an integer."""
    bounded = max(0.0, min(100.0, value))
    return int(math.floor(bounded + 0.5))


def score_from_observation(observation: Observation) -> RiskScores:
    """Pure function: compute risk scores from a live observation."""
    temp = observation.temperature_c
    humidity = observation.humidity_pct

    hot = temp / HOT_CEILING_C * 100
    cold = (COLD_THRESHOLD_C - temp) / COLD_THRESHOLD_C * 100
    if observation.condition == ConditionCode.RAIN:
        wet = humidity
    else:
        wet = humidity * DRY_WET_FACTOR
    windy = observation.wind_speed_ms / WIND_CEILING_MS * 100
    uncomfortable = (humidity + temp) / 2

    return RiskScores(
        hot=clamp_score(hot),
        cold=clamp_score(cold),
        windy=clamp_score(windy),
        wet=clamp_score(wet),
        uncomfortable=clamp_score(uncomfortable),
    )


def _baseline_value(baseline: RiskScores | Mapping[str, float], axis: str) -> float:
    if isinstance(baseline, Mapping):
        return float(baseline[axis])
    return float(getattr(baseline, axis))


def score_from_baseline(
    baseline: RiskScores | Mapping[str, float],
    *,
    rng: random.Random | None = None,
    jitter: float = DEFAULT_JITTER,
) -> RiskScores:
    """Simulate risk scores around an activity baseline.

    Each axis is perturbed independently by uniform(-jitter, +jitter). Pass a
    seeded ``random.Random`` for reproducible output.
    """
    source = rng or random
    values = {
        axis: clamp_score(_baseline_value(baseline, axis) + source.uniform(-jitter, jitter))
        for axis in RISK_AXES
    }
    return RiskScores(**values)
