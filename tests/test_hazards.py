import math
from pathlib import Path

import pytest

from weather_risk.config import BUNDLED_HAZARD_CATALOG
from weather_risk.domain import Coordinates, HazardRecord
from weather_risk.hazards import find_nearest, haversine_km, load_hazard_catalog

# latitude offset that puts a point exactly 500 km north of the equator
LAT_500_KM = math.degrees(500 / 6371.0)


def hazard(id_, lat, lon, category="hurricane"):
    return HazardRecord(id=id_, category=category, lat=lat, lon=lon, pressure_hpa=950, date="2020-09-01")


def test_haversine_known_distance():
    # London -> Paris is roughly 344 km
    assert haversine_km(51.5074, -0.1278, 48.8566, 2.3522) == pytest.approx(343.5, abs=1.0)
    assert haversine_km(10, 10, 10, 10) == 0.0


def test_empty_catalog_returns_none():
    assert find_nearest([], Coordinates(lat=0, lon=0), 1000) is None


def test_single_record_within_radius():
    match = find_nearest([hazard("h1", LAT_500_KM, 0.0)], Coordinates(lat=0, lon=0), 1000)
    assert match is not None
    assert match.hazard.id == "h1"
    assert match.distance_km == pytest.approx(500, abs=0.5)


def test_single_record_outside_radius():
    assert find_nearest([hazard("h1", LAT_500_KM, 0.0)], Coordinates(lat=0, lon=0), 100) is None


def test_first_match_in_catalog_order_wins_over_closer():
    far = hazard("far", LAT_500_KM, 0.0)
    near = hazard("near", 0.5, 0.0)
    match = find_nearest([far, near], {"lat": 0.0, "lon": 0.0}, 1000)
    assert match.hazard.id == "far"


def test_radius_is_inclusive():
    record = hazard("edge", LAT_500_KM, 0.0)
    distance = haversine_km(0, 0, LAT_500_KM, 0)
    assert find_nearest([record], {"lat": 0, "lon": 0}, distance) is not None


def test_non_numeric_rows_are_skipped():
    catalog = [
        HazardRecord(id="header", category="category", lat="lat", lon="lon"),
        HazardRecord(id="blank", category="flood", lat=None, lon=None),
        hazard("strings", "1.0", "1.0"),
    ]
    match = find_nearest(catalog, {"lat": 0, "lng": 0}, 1000)
    assert match.hazard.id == "strings"
    assert match.distance_km == pytest.approx(haversine_km(0, 0, 1, 1))


def test_catalog_not_mutated():
    catalog = [hazard("a", 10, 10), hazard("b", 20, 20)]
    snapshot = [r.model_dump() for r in catalog]
    find_nearest(catalog, {"lat": 10, "lon": 10}, 50)
    assert [r.model_dump() for r in catalog] == snapshot


def test_load_bundled_catalog():
    records = load_hazard_catalog(BUNDLED_HAZARD_CATALOG)
    assert len(records) >= 10
    katrina = next(r for r in records if r.id == "katrina-2005")
    assert katrina.category == "hurricane"
    assert katrina.pressure_hpa == 920.0
    # New Orleans is well inside 1000 km of Katrina's landfall
    match = find_nearest(records, {"lat": 29.95, "lon": -90.07}, 1000)
    assert match is not None


def test_load_catalog_keeps_unparseable_rows(tmp_path: Path):
    path = tmp_path / "catalog.csv"
    path.write_text(
        "id,category,lat,lon,pressure_hpa,date\n"
        "x1,tornado,n/a,n/a,,2011-04-27\n"
        ",storm,40.0,-100.0,990,\n",
        encoding="utf-8",
    )
    records = load_hazard_catalog(path)
    assert [r.id for r in records] == ["x1", "row-3"]
    assert records[0].pressure_hpa is None
    assert records[1].date is None
    match = find_nearest(records, {"lat": 40.0, "lon": -100.0}, 10)
    assert match.hazard.id == "row-3"
