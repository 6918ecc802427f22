"""
GeoJSON output structures.

Only the subset produced by the projector is modelled: a FeatureCollection of
Point features, each with a ``name`` property. Coordinates are [lon, lat].
"""

import json
from typing import Literal, Sequence, TypedDict

DEFAULT_POINT_NAME = "point"


class PointGeometry(TypedDict):
    type: Literal["Point"]
    coordinates: list[float]


class FeatureProperties(TypedDict):
    name: str


class PointFeature(TypedDict):
    type: Literal["Feature"]
    geometry: PointGeometry
    properties: FeatureProperties


class FeatureCollection(TypedDict):
    type: Literal["FeatureCollection"]
    features: list[PointFeature]


def point_feature(lon: float, lat: float, name: str | None = None) -> PointFeature:
    """Build a Point feature; an empty or missing name falls back to DEFAULT_POINT_NAME."""
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "properties": {"name": name or DEFAULT_POINT_NAME},
    }


def feature_collection(features: Sequence[PointFeature]) -> FeatureCollection:
    return {"type": "FeatureCollection", "features": list(features)}


def empty_feature_collection() -> FeatureCollection:
    return feature_collection([])


def to_json(collection: FeatureCollection, indent: int | None = 2) -> str:
    """Serialize a feature collection to a JSON string.

    Args:
        collection: Feature collection to serialize.
        indent: Number of spaces for JSON indentation (None for compact output).

    Returns:
        JSON string representation.

    Raises:
        ValueError: If a coordinate is NaN or infinite (not representable in JSON).
    """
    return json.dumps(collection, indent=indent, allow_nan=False)
