"""
Unit type annotations for type-safe numeric parameters.

This module defines NewType aliases for the physical units used across the
geo_homography package. They are erased at runtime and only help static type
checkers catch unit mismatches (e.g. passing meters where degrees are expected).

Usage Example:
    >>> from geo_homography.types import Degrees, Meters
    >>>
    >>> def local_to_lon_lat(ref_lon: Degrees, ref_lat: Degrees,
    ...                      east_m: Meters, north_m: Meters) -> tuple[Degrees, Degrees]:
    ...     pass
"""

from typing import NewType

# Angular units
Degrees = NewType('Degrees', float)
"""Angle in degrees (longitude, latitude)"""

# Distance/position units
Meters = NewType('Meters', float)
"""Offset in meters on the local east/north plane"""

Point2D = tuple[float, float]
"""Plain (x, y) coordinate pair in either image or local metric space"""
