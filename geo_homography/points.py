"""Input records: ground control points and pixel points to project."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping


def finite_number(value: Any, field_name: str) -> float:
    """Convert a coordinate value to float.

    Raises:
        ValueError: If the value is a bool, not numeric, NaN or infinite.
    """
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be a number, got {value!r}") from None
    if math.isnan(number) or math.isinf(number):
        raise ValueError(
            f"{field_name} must be a finite number, got {value!r} "
            f"(NaN and Infinity are not allowed)"
        )
    return number


def _number(data: Mapping[str, Any], key: str, kind: str) -> float:
    """Read a required numeric field, naming the record kind on failure."""
    if key not in data:
        raise ValueError(f"{kind} is missing required key '{key}': {dict(data)}")
    return finite_number(data[key], f"{kind} field '{key}'")


@dataclass(frozen=True)
class GCP:
    """Ground Control Point: a pixel location with a known geographic position.

    Attributes:
        image_x: Pixel x coordinate (column).
        image_y: Pixel y coordinate (row).
        lon: Longitude in decimal degrees (WGS84).
        lat: Latitude in decimal degrees (WGS84).
    """

    image_x: float
    image_y: float
    lon: float
    lat: float

    @property
    def pixel(self) -> tuple[float, float]:
        return (self.image_x, self.image_y)

    def to_dict(self) -> dict[str, Any]:
        """Convert GCP to a dictionary for JSON/YAML serialization."""
        return {
            "image_x": self.image_x,
            "image_y": self.image_y,
            "lon": self.lon,
            "lat": self.lat,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GCP:
        """Create GCP from a dictionary with image_x, image_y, lon and lat keys.

        Raises:
            ValueError: If a key is missing or a value is not numeric.
        """
        return cls(
            image_x=_number(data, "image_x", "GCP"),
            image_y=_number(data, "image_y", "GCP"),
            lon=_number(data, "lon", "GCP"),
            lat=_number(data, "lat", "GCP"),
        )


@dataclass(frozen=True)
class PointToProject:
    """Pixel location to convert to geographic coordinates.

    Attributes:
        image_x: Pixel x coordinate (column).
        image_y: Pixel y coordinate (row).
        label: Human-readable name used for the output feature.
    """

    image_x: float
    image_y: float
    label: str = ""

    @property
    def pixel(self) -> tuple[float, float]:
        return (self.image_x, self.image_y)

    def to_dict(self) -> dict[str, Any]:
        return {"image_x": self.image_x, "image_y": self.image_y, "label": self.label}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PointToProject:
        """Create PointToProject from a dictionary; ``label`` is optional.

        Raises:
            ValueError: If a coordinate is missing or not numeric.
        """
        label = data.get("label")
        return cls(
            image_x=_number(data, "image_x", "Point to project"),
            image_y=_number(data, "image_y", "Point to project"),
            label="" if label is None else str(label),
        )
