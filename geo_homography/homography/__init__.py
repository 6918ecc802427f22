"""
Planar homography fitting and application.

- HomographyMatrix: immutable, normalized 3x3 matrix
- get_perspective_transform_4: exact four-point DLT fit
- apply_homography: map one point with projective division
"""

from geo_homography.homography.dlt import (
    MIN_POINT_PAIRS,
    POINT_AT_INFINITY_EPSILON,
    apply_homography,
    get_perspective_transform_4,
)
from geo_homography.homography.matrix import HomographyMatrix

__all__ = [
    "HomographyMatrix",
    "MIN_POINT_PAIRS",
    "POINT_AT_INFINITY_EPSILON",
    "apply_homography",
    "get_perspective_transform_4",
]
