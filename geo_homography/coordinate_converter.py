"""
Local metric plane <-> longitude/latitude conversion.

Uses the equirectangular (flat-earth) approximation around a reference point:

    lon = ref_lon + east_m / (R × cos(ref_lat))
    lat = ref_lat + north_m / R

where R = 111,320 meters per degree of latitude. Both directions use the
reference latitude's cosine, so converting to local meters and back returns
the reference point exactly and nearby points to within rounding error.

Coordinate System Convention:
    - east_m: positive = East of the reference point
    - north_m: positive = North of the reference point

Accuracy Notes:
    - Intended for offsets that are small compared to the Earth's radius
    - Breaks down near the poles, where cos(lat) -> 0; no check is made
"""

import math
from typing import Iterable, Protocol

from geo_homography.types import Degrees, Meters

# Meters per degree of latitude (WGS84 approximation)
METERS_PER_DEGREE = 111320


class HasLonLat(Protocol):
    """Anything carrying geographic ``lon`` / ``lat`` attributes (e.g. a GCP)."""

    lon: float
    lat: float


def local_to_lon_lat(
    ref_lon: Degrees, ref_lat: Degrees, east_m: Meters, north_m: Meters
) -> tuple[Degrees, Degrees]:
    """
    Convert a metric offset from a reference point into longitude/latitude.

    Args:
        ref_lon: Reference longitude in decimal degrees
        ref_lat: Reference latitude in decimal degrees
        east_m: East-West offset in meters (positive = East)
        north_m: North-South offset in meters (positive = North)

    Returns:
        Tuple of (lon, lat) in decimal degrees

    Example:
        >>> local_to_lon_lat(-79.9, 43.65, 0.0, 0.0)
        (-79.9, 43.65)
    """
    lat_rad = math.radians(ref_lat)
    lon = ref_lon + east_m / (METERS_PER_DEGREE * math.cos(lat_rad))
    lat = ref_lat + north_m / METERS_PER_DEGREE
    return Degrees(lon), Degrees(lat)


def lon_lat_to_local(
    ref_lon: Degrees, ref_lat: Degrees, lon: Degrees, lat: Degrees
) -> tuple[Meters, Meters]:
    """
    Convert longitude/latitude into a metric offset from a reference point.

    Inverse of local_to_lon_lat: uses the same constant and the reference
    latitude's cosine.

    Returns:
        Tuple of (east_m, north_m)
    """
    lat_rad = math.radians(ref_lat)
    east_m = (lon - ref_lon) * (METERS_PER_DEGREE * math.cos(lat_rad))
    north_m = (lat - ref_lat) * METERS_PER_DEGREE
    return Meters(east_m), Meters(north_m)


def reference_point(points: Iterable[HasLonLat]) -> tuple[Degrees, Degrees]:
    """Arithmetic mean (lon, lat) of the given points, used as the local plane origin.

    Raises:
        ValueError: If no points are given.
    """
    points = list(points)
    if not points:
        raise ValueError("Cannot compute a reference point from an empty point set")
    ref_lon = sum(p.lon for p in points) / len(points)
    ref_lat = sum(p.lat for p in points) / len(points)
    return Degrees(ref_lon), Degrees(ref_lat)
