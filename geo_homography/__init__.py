"""
GCP-based homography projection from image pixels to longitude/latitude.

Given at least four Ground Control Points (pixel <-> lon/lat), the package fits
an exact planar homography from image pixels to a local east/north metric plane
centred on the GCP centroid, and converts arbitrary pixel points to lon/lat
using an equirectangular approximation. Results are GeoJSON FeatureCollections.

Example Usage:
    >>> from geo_homography import GCP, PointToProject, project_to_geojson
    >>>
    >>> gcps = [
    ...     GCP(image_x=0, image_y=0, lon=-80.0, lat=44.0),
    ...     GCP(image_x=100, image_y=0, lon=-79.0, lat=44.0),
    ...     GCP(image_x=100, image_y=100, lon=-79.0, lat=43.0),
    ...     GCP(image_x=0, image_y=100, lon=-80.0, lat=43.0),
    ... ]
    >>> fc = project_to_geojson(gcps, [PointToProject(50, 50, "center")])
    >>> fc["features"][0]["properties"]["name"]
    'center'

Available Components:
    Core:
        - get_perspective_transform_4: four-point DLT homography fit
        - apply_homography: map one point with projective division
        - local_to_lon_lat / lon_lat_to_local: equirectangular conversion
        - project_to_geojson: full GCP -> GeoJSON pipeline

    Records:
        - GCP, PointToProject: pipeline inputs
        - ProjectionInput, default_input: caller-side configuration record
        - HomographyMatrix: normalized 3x3 matrix
"""

from geo_homography.coordinate_converter import (
    METERS_PER_DEGREE,
    local_to_lon_lat,
    lon_lat_to_local,
    reference_point,
)
from geo_homography.exceptions import (
    InsufficientPointsError,
    PointAtInfinityError,
    ProjectionError,
    SingularSystemError,
)
from geo_homography.geojson import FeatureCollection, PointFeature
from geo_homography.homography import (
    HomographyMatrix,
    apply_homography,
    get_perspective_transform_4,
)
from geo_homography.linear_solver import solve_linear_system
from geo_homography.points import GCP, PointToProject
from geo_homography.projection_input import ProjectionInput, default_input
from geo_homography.projector import LocalPlaneFit, fit_local_plane, project_to_geojson

__all__ = [
    # Core operations
    "get_perspective_transform_4",
    "apply_homography",
    "local_to_lon_lat",
    "lon_lat_to_local",
    "reference_point",
    "project_to_geojson",
    "fit_local_plane",
    "solve_linear_system",
    "METERS_PER_DEGREE",

    # Records
    "GCP",
    "PointToProject",
    "HomographyMatrix",
    "LocalPlaneFit",
    "FeatureCollection",
    "PointFeature",
    "ProjectionInput",
    "default_input",

    # Errors
    "ProjectionError",
    "InsufficientPointsError",
    "SingularSystemError",
    "PointAtInfinityError",
]

__version__ = '0.1.0'
