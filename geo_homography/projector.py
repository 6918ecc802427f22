"""
GCP-based projection of image pixels to longitude/latitude.

Pipeline:
    1. Reference point = centroid of all GCP longitudes/latitudes
    2. Each GCP -> local east/north meters around the reference point
    3. Exact four-point homography: pixel -> local meters (first four GCPs)
    4. Each point to project -> local meters -> lon/lat
    5. One GeoJSON Point feature per input point, in input order

Fewer than four GCPs is an expected transient state for interactive callers
and yields an empty FeatureCollection. Degenerate geometry (singular system,
point at infinity) propagates as an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from geo_homography.coordinate_converter import (
    local_to_lon_lat,
    lon_lat_to_local,
    reference_point,
)
from geo_homography.exceptions import InsufficientPointsError
from geo_homography.geojson import (
    FeatureCollection,
    empty_feature_collection,
    feature_collection,
    point_feature,
)
from geo_homography.homography import (
    MIN_POINT_PAIRS,
    HomographyMatrix,
    apply_homography,
    get_perspective_transform_4,
)
from geo_homography.points import GCP, PointToProject
from geo_homography.types import Degrees

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalPlaneFit:
    """Homography from image pixels to the local metric plane around a reference point.

    Attributes:
        matrix: Pixel -> (east_m, north_m) homography.
        ref_lon: Longitude of the local plane origin (GCP centroid).
        ref_lat: Latitude of the local plane origin (GCP centroid).
    """

    matrix: HomographyMatrix
    ref_lon: Degrees
    ref_lat: Degrees

    def to_lon_lat(self, image_x: float, image_y: float) -> tuple[Degrees, Degrees]:
        """Project one pixel to (lon, lat).

        Raises:
            PointAtInfinityError: If the pixel lies on the homography's vanishing line.
        """
        east_m, north_m = apply_homography(self.matrix, image_x, image_y)
        return local_to_lon_lat(self.ref_lon, self.ref_lat, east_m, north_m)


def fit_local_plane(gcps: Sequence[GCP]) -> LocalPlaneFit:
    """
    Fit the pixel -> local meters homography for a set of GCPs.

    The reference point is the centroid of all GCPs, but only the first four
    take part in the fit.

    Raises:
        InsufficientPointsError: If fewer than four GCPs are given
        SingularSystemError: If the first four GCPs are degenerate
    """
    if len(gcps) < MIN_POINT_PAIRS:
        raise InsufficientPointsError(
            f"Need at least {MIN_POINT_PAIRS} point pairs for projective homography "
            f"(got {len(gcps)} GCPs)"
        )
    if len(gcps) > MIN_POINT_PAIRS:
        logger.warning(
            f"{len(gcps)} GCPs supplied; only the first {MIN_POINT_PAIRS} are used "
            f"for the exact homography fit"
        )

    ref_lon, ref_lat = reference_point(gcps)

    src = [g.pixel for g in gcps]
    dst = [lon_lat_to_local(ref_lon, ref_lat, g.lon, g.lat) for g in gcps]

    matrix = get_perspective_transform_4(src, dst)
    logger.debug(f"Reference point ({ref_lon:.7f}, {ref_lat:.7f}), homography {matrix.to_list()}")
    return LocalPlaneFit(matrix=matrix, ref_lon=ref_lon, ref_lat=ref_lat)


def project_to_geojson(
    gcps: Sequence[GCP],
    points_to_project: Sequence[PointToProject],
) -> FeatureCollection:
    """
    Project pixel points to a GeoJSON FeatureCollection of Point features.

    Args:
        gcps: Ground control points (pixel + lon/lat); at least four are needed
        points_to_project: Pixel points with labels

    Returns:
        FeatureCollection with one feature per point, in input order. Each
        feature is named after the point's label, or "point" when the label is
        empty. Empty when fewer than four GCPs are given.

    Raises:
        SingularSystemError: If the first four GCPs are degenerate
        PointAtInfinityError: If a point maps to infinity
    """
    if len(gcps) < MIN_POINT_PAIRS:
        logger.debug(
            f"Only {len(gcps)} GCPs, need {MIN_POINT_PAIRS}; returning empty FeatureCollection"
        )
        return empty_feature_collection()

    fit = fit_local_plane(gcps)

    features = []
    for pt in points_to_project:
        lon, lat = fit.to_lon_lat(*pt.pixel)
        features.append(point_feature(lon, lat, pt.label))

    return feature_collection(features)
