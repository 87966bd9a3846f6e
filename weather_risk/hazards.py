"""Proximity lookup against a static catalog of historical hazard events."""

from __future__ import annotations

import csv
import math
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from weather_risk.domain import Coordinates, HazardMatch, HazardRecord
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="hazards")

EARTH_RADIUS_KM = 6371.0
DEFAULT_RADIUS_KM = 1000.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lam = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lam / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def _parse_coordinate(value: Any) -> Optional[float]:
    """Return a finite float for numeric or numeric-string coordinates, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _query_point(query: Union[Coordinates, Mapping[str, float]]) -> tuple[float, float]:
    if isinstance(query, Mapping):
        lon = query.get("lon", query.get("lng"))
        return float(query["lat"]), float(lon)
    return query.lat, query.lon


def find_nearest(
    catalog: Iterable[HazardRecord],
    query: Union[Coordinates, Mapping[str, float]],
    radius_km: float = DEFAULT_RADIUS_KM,
) -> Optional[HazardMatch]:
    """
    Return the first catalog hazard within `radius_km` of `query`.

    Entries are scanned in catalog order and the first one inside the radius
    wins, even if a later entry is closer. Rows whose coordinates do not parse
    (header rows, blanks, sentinels) are skipped.
    """
    q_lat, q_lon = _query_point(query)
    skipped = 0
    for record in catalog:
        lat = _parse_coordinate(record.lat)
        lon = _parse_coordinate(record.lon)
        if lat is None or lon is None:
            skipped += 1
            continue
        distance = haversine_km(q_lat, q_lon, lat, lon)
        if distance <= radius_km:
            logger.debug(f"Hazard {record.id} within radius at {distance:.1f} km")
            return HazardMatch(hazard=record, distance_km=distance)

    if skipped:
        logger.debug(f"Skipped {skipped} hazard rows with unusable coordinates")
    return None


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _row_to_record(row: Mapping[str, Optional[str]], line_no: int) -> HazardRecord:
    pressure = _parse_coordinate(row.get("pressure_hpa") or row.get("pressureHPa"))
    return HazardRecord(
        id=_blank_to_none(row.get("id")) or f"row-{line_no}",
        category=_blank_to_none(row.get("category")) or "unknown",
        lat=_blank_to_none(row.get("lat")),
        lon=_blank_to_none(row.get("lon") or row.get("lng")),
        pressure_hpa=pressure,
        date=_blank_to_none(row.get("date")),
    )


def load_hazard_catalog(path: Union[str, Path]) -> List[HazardRecord]:
    """Read a CSV hazard dataset (id, category, lat, lon, pressure_hpa, date).

    Coordinates are kept as text; unusable rows stay in the list and are
    skipped at lookup time.
    """
    path = Path(path)
    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        records = [_row_to_record(row, line_no) for line_no, row in enumerate(reader, start=2)]
    logger.info(f"Loaded {len(records)} hazard records from {path}")
    return records
