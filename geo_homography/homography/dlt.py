"""
Four-point direct linear transform (DLT) and homography application.

Each correspondence (x, y) -> (x', y') contributes two rows to an 8x8 system:

    [x, y, 1, 0, 0, 0, -x*x', -y*x']  ->  x'
    [0, 0, 0, x, y, 1, -x*y', -y*y']  ->  y'

whose solution [h11..h32] completed with h33 = 1 is the homography. The result
equals OpenCV's getPerspectiveTransform for the same four correspondences.
"""

from typing import Sequence

from geo_homography.exceptions import InsufficientPointsError, PointAtInfinityError
from geo_homography.homography.matrix import HomographyMatrix
from geo_homography.linear_solver import solve_linear_system
from geo_homography.types import Point2D

# Exact projective fit needs four correspondences
MIN_POINT_PAIRS = 4

# |w| below this means the mapped point is unbounded
POINT_AT_INFINITY_EPSILON = 1e-10


def get_perspective_transform_4(
    src: Sequence[Point2D],
    dst: Sequence[Point2D],
) -> HomographyMatrix:
    """
    Compute the projective homography mapping ``src`` onto ``dst``.

    Only the first four correspondences are used; extra points are ignored
    rather than fitted in a least-squares sense.

    Args:
        src: Source points (x, y), e.g. image pixels
        dst: Destination points (x', y'), e.g. local east/north meters

    Returns:
        HomographyMatrix with h33 == 1

    Raises:
        InsufficientPointsError: If either sequence has fewer than 4 points
        SingularSystemError: If the correspondences are degenerate
    """
    if len(src) < MIN_POINT_PAIRS or len(dst) < MIN_POINT_PAIRS:
        raise InsufficientPointsError(
            f"Need at least {MIN_POINT_PAIRS} point pairs for projective homography "
            f"(got {len(src)} source, {len(dst)} destination)"
        )

    a: list[list[float]] = []
    b: list[float] = []
    for i in range(MIN_POINT_PAIRS):
        x, y = src[i]
        xp, yp = dst[i]
        a.append([x, y, 1, 0, 0, 0, -x * xp, -y * xp])
        b.append(xp)
        a.append([0, 0, 0, x, y, 1, -x * yp, -y * yp])
        b.append(yp)

    h = solve_linear_system(a, b)
    return HomographyMatrix.from_coefficients([*h, 1.0])


def apply_homography(h: Sequence[float], x: float, y: float) -> Point2D:
    """
    Map a single point through a normalized homography.

    Args:
        h: 9 row-major coefficients with h33 == 1 (a HomographyMatrix or plain list)
        x: Source x coordinate
        y: Source y coordinate

    Returns:
        Tuple (x', y'); for GCP fits this is (east_m, north_m)

    Raises:
        PointAtInfinityError: If the homogeneous denominator is near zero
    """
    w = h[6] * x + h[7] * y + 1
    if abs(w) < POINT_AT_INFINITY_EPSILON:
        raise PointAtInfinityError(f"Homography: point at infinity for ({x}, {y})")
    east = (h[0] * x + h[1] * y + h[2]) / w
    north = (h[3] * x + h[4] * y + h[5]) / w
    return float(east), float(north)
