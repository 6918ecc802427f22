"""
Errors raised by the homography pipeline.

All of them are ValueError subclasses: they describe caller-supplied geometry
that cannot be used, not a fault of the library. Retrying with the same input
always fails the same way.
"""


class ProjectionError(ValueError):
    """Base class for unusable point geometry."""


class InsufficientPointsError(ProjectionError):
    """Fewer than four point correspondences were supplied to a fit."""


class SingularSystemError(ProjectionError):
    """The DLT system has no unique solution (collinear, duplicated or colocated points)."""


class PointAtInfinityError(ProjectionError):
    """The homogeneous denominator vanished; the point lies on the vanishing line."""
