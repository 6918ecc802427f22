"""
Configuration record assembled by callers (UI, CLI) before projecting.

Holds the GCPs and points to project together with display-only settings
(image reference, camera position). Only ``gcps`` and ``points_to_project``
reach the projection pipeline.

File format (YAML; JSON is accepted as well):

    image_url: "frame.jpg"
    include_camera_view: true
    camera_lon: -79.9248758
    camera_lat: 43.6527426
    gcps:
      - {image_x: 0, image_y: 0, lon: -80.0, lat: 44.0}
      - ...
    points_to_project:
      - {image_x: 50, image_y: 50, label: "center"}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from geo_homography.geojson import FeatureCollection, PointFeature, point_feature
from geo_homography.points import GCP, PointToProject, finite_number
from geo_homography.projector import project_to_geojson

logger = logging.getLogger(__name__)

DEFAULT_CAMERA_LON = -79.9248758
DEFAULT_CAMERA_LAT = 43.6527426
CAMERA_FEATURE_NAME = "camera"


@dataclass
class ProjectionInput:
    """Caller-side configuration for a projection request.

    Attributes:
        image_url: Reference to the image the pixel coordinates belong to.
        gcps: Ground control points used to fit the homography.
        include_camera_view: Whether consumers should display the camera position.
        points_to_project: Pixel points to convert to lon/lat.
        camera_lon: Optional camera longitude for display.
        camera_lat: Optional camera latitude for display.
    """

    image_url: str = ""
    gcps: list[GCP] = field(default_factory=list)
    include_camera_view: bool = True
    points_to_project: list[PointToProject] = field(default_factory=list)
    camera_lon: float | None = None
    camera_lat: float | None = None

    def project(self) -> FeatureCollection:
        """Project ``points_to_project`` using ``gcps``."""
        return project_to_geojson(self.gcps, self.points_to_project)

    def camera_feature(self) -> PointFeature | None:
        """Camera position as a Point feature, or None when it should not be shown."""
        if not self.include_camera_view:
            return None
        if self.camera_lon is None or self.camera_lat is None:
            return None
        return point_feature(self.camera_lon, self.camera_lat, CAMERA_FEATURE_NAME)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary using the on-disk field names."""
        return {
            "image_url": self.image_url,
            "gcps": [gcp.to_dict() for gcp in self.gcps],
            "include_camera_view": self.include_camera_view,
            "points_to_project": [pt.to_dict() for pt in self.points_to_project],
            "camera_lon": self.camera_lon,
            "camera_lat": self.camera_lat,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProjectionInput:
        """Create a ProjectionInput from a dictionary.

        Missing keys take the dataclass defaults.

        Raises:
            ValueError: If a section has the wrong type or an entry is malformed.
        """
        gcps_data = data.get("gcps") or []
        points_data = data.get("points_to_project") or []
        if not isinstance(gcps_data, list):
            raise ValueError(f"'gcps' must be a list, got {type(gcps_data).__name__}")
        if not isinstance(points_data, list):
            raise ValueError(
                f"'points_to_project' must be a list, got {type(points_data).__name__}"
            )

        return cls(
            image_url=str(data.get("image_url") or ""),
            gcps=[GCP.from_dict(_entry(g, "gcps", i)) for i, g in enumerate(gcps_data)],
            include_camera_view=_optional_bool(data, "include_camera_view", default=True),
            points_to_project=[
                PointToProject.from_dict(_entry(p, "points_to_project", i))
                for i, p in enumerate(points_data)
            ],
            camera_lon=_optional_float(data, "camera_lon"),
            camera_lat=_optional_float(data, "camera_lat"),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> ProjectionInput:
        """Load a ProjectionInput from a YAML or JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is empty, cannot be parsed or has invalid entries
        """
        input_path = Path(path)

        if not input_path.exists():
            raise FileNotFoundError(f"Projection input file not found: {path}")

        try:
            with open(input_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse projection input file: {e}") from e

        if data is None:
            raise ValueError(f"Projection input file is empty: {path}")
        if not isinstance(data, dict):
            raise ValueError(
                f"Projection input must be a mapping at the top level: {path}"
            )

        projection_input = cls.from_dict(data)
        logger.info(
            f"Loaded {len(projection_input.gcps)} GCPs and "
            f"{len(projection_input.points_to_project)} points from {input_path}"
        )
        return projection_input

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False)


def _entry(value: Any, section: str, index: int) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{section}[{index}] must be a mapping, got {value!r}")
    return value


def _optional_float(data: Mapping[str, Any], key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    return finite_number(value, f"'{key}'")


def _optional_bool(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be a boolean or null, got {value!r}")
    return value


def default_input() -> ProjectionInput:
    """Empty projection input for demos and the initial interactive state."""
    return ProjectionInput(
        image_url="",
        gcps=[],
        include_camera_view=True,
        points_to_project=[],
        camera_lon=DEFAULT_CAMERA_LON,
        camera_lat=DEFAULT_CAMERA_LAT,
    )
