"""One-line advice derived from the highest risk score above its threshold."""

from __future__ import annotations

from typing import NamedTuple

from weather_risk.domain import RiskScores


class _RiskAdvice(NamedTuple):
    axis: str
    label: str
    threshold: int
    advice: str


# Ties go to the later entry.
RECOMMENDATION_RULES: tuple[_RiskAdvice, ...] = (
    _RiskAdvice("wet", "rain", 60, "Better pack an umbrella and waterproof gear!"),
    _RiskAdvice("windy", "wind", 70, "Expect strong winds - secure loose items and dress appropriately!"),
    _RiskAdvice("hot", "heat", 80, "Stay hydrated and seek shade regularly!"),
    _RiskAdvice("cold", "cold", 70, "Bundle up with warm layers and protect exposed skin!"),
    _RiskAdvice("uncomfortable", "uncomfortable conditions", 65,
                "High humidity and heat - take frequent breaks and stay cool!"),
)

PERFECT_CONDITIONS = "Perfect conditions for your outdoor activity! Enjoy your adventure!"


def recommend(scores: RiskScores) -> str:
    """Pure function: summarize the dominant risk, or praise the conditions."""
    primary = None
    primary_value = -1
    for rule in RECOMMENDATION_RULES:
        value = getattr(scores, rule.axis)
        if value > rule.threshold and value >= primary_value:
            primary, primary_value = rule, value

    if primary is None:
        return PERFECT_CONDITIONS
    return (f"There's a {primary_value}% chance of {primary.label} on your chosen day. "
            f"{primary.advice}")
