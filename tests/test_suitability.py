import pytest

from weather_risk.activities import resolve_activity
from weather_risk.domain import ConditionCode, Observation
from weather_risk.suitability import SuitabilityRule, explain_suitability, is_suitable


def obs(temp, wind=0.0):
    return Observation(
        temperature_c=temp,
        feels_like_c=temp,
        humidity_pct=50,
        wind_speed_ms=wind,
        condition=ConditionCode.CLEAR,
    )


def test_walking_lower_bound_is_exclusive():
    walking = resolve_activity("walking")
    assert is_suitable(walking, obs(10.0, wind=5)) is False
    assert is_suitable(walking, obs(10.01, wind=5)) is True
    assert is_suitable(walking, obs(10.01, wind=30)) is False
    assert is_suitable(walking, obs(10.01, wind=29.9)) is True


@pytest.mark.parametrize(
    "tag, temp, wind, expected",
    [
        ("picnic", 20, 50, True),  # picnic ignores wind
        ("picnic", 30, 0, False),
        ("fishing", 5, 0, False),
        ("fishing", 5.1, 40, True),
        ("iceSkating", 0, 0, True),
        ("iceSkating", 0.1, 0, False),
        ("iceSkating", -12, 10, True),
        ("swimming", 28, 19.9, True),
        ("swimming", 28, 20, False),
        ("swimming", 20, 0, False),
        ("cycling", 20, 24, True),
        ("cycling", 30, 0, False),
        ("hiking", 5, 0, False),
        ("hiking", 29.9, 29.9, True),
        ("beach", 30, 10, True),
        ("beach", 25, 10, False),
        ("beach", 35, 10, False),
        ("barbecue", 34.9, 60, True),
        ("barbecue", 15, 0, False),
        ("sports", 20, 0, False),
        ("other", 20, 0, False),
        ("paragliding", 20, 0, False),
    ],
)
def test_activity_rules(tag, temp, wind, expected):
    assert is_suitable(resolve_activity(tag), obs(temp, wind)) is expected


def test_explain_lists_each_failed_bound():
    reasons = explain_suitability(resolve_activity("cycling"), obs(31, wind=26))
    assert len(reasons) == 2
    assert any(r.startswith("Too hot") for r in reasons)
    assert any(r.startswith("Too windy") for r in reasons)


def test_explain_empty_when_suitable():
    assert explain_suitability(resolve_activity("hiking"), obs(18, wind=3)) == []


def test_explain_for_rule_without_thresholds():
    assert explain_suitability(resolve_activity("other"), obs(18)) == ["No suitability rule for this activity"]


def test_rule_is_callable():
    rule = SuitabilityRule(temp_above=0, temp_below=10)
    assert rule(obs(5)) is True
    assert rule(obs(10)) is False
