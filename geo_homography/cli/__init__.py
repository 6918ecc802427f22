"""CLI module for geo_homography.

Provides the `geo-homography` command-line interface for projecting pixel
points described in a projection input file.
"""

from geo_homography.cli.main import app

__all__ = ["app"]
