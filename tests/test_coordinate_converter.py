"""
Tests for geo_homography.coordinate_converter.

Example-based tests pin the equirectangular formulas; property-based tests
(Hypothesis) verify:

1. Round trip at the reference point: local_to_lon_lat(ref, 0, 0) == ref exactly
2. Monotonicity: more east -> larger lon, more north -> larger lat
3. lon_lat_to_local is the inverse of local_to_lon_lat
"""

import math

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from geo_homography.coordinate_converter import (
    METERS_PER_DEGREE,
    local_to_lon_lat,
    lon_lat_to_local,
    reference_point,
)
from geo_homography.points import GCP

finite = dict(allow_nan=False, allow_infinity=False)
longitude_strategy = st.floats(min_value=-180.0, max_value=180.0, **finite)
# Stay away from the poles where cos(lat) -> 0
latitude_strategy = st.floats(min_value=-89.0, max_value=89.0, **finite)
offset_strategy = st.floats(min_value=-1e5, max_value=1e5, **finite)
step_strategy = st.floats(min_value=1.0, max_value=1e4, **finite)


class TestLocalToLonLat:
    """Example-based tests for local_to_lon_lat."""

    def test_zero_offset_returns_reference(self) -> None:
        """Test that a zero offset returns the reference point unchanged."""
        assert local_to_lon_lat(-79.9, 43.65, 0.0, 0.0) == (-79.9, 43.65)

    def test_one_degree_at_equator(self) -> None:
        """Test that METERS_PER_DEGREE meters is exactly one degree at the equator."""
        lon, lat = local_to_lon_lat(0.0, 0.0, METERS_PER_DEGREE, METERS_PER_DEGREE)

        assert lon == 1.0
        assert lat == 1.0

    def test_longitude_scales_with_latitude(self) -> None:
        """Test that at 60° a meter east spans twice the longitude it does at the equator."""
        lon, lat = local_to_lon_lat(10.0, 60.0, METERS_PER_DEGREE, 0.0)

        assert lon == pytest.approx(12.0, abs=1e-12)
        assert lat == 60.0

    def test_positive_east_increases_lon(self) -> None:
        """Test positive east offset at mid latitude."""
        lon, _ = local_to_lon_lat(0.0, 45.0, 1000.0, 0.0)

        assert lon > 0.0

    def test_positive_north_increases_lat(self) -> None:
        """Test positive north offset."""
        _, lat = local_to_lon_lat(0.0, 0.0, 0.0, 1000.0)

        assert lat > 0.0

    def test_negative_offsets_move_south_west(self) -> None:
        """Test that negative offsets decrease lon and lat."""
        lon, lat = local_to_lon_lat(-79.9, 43.65, -500.0, -500.0)

        assert lon < -79.9
        assert lat < 43.65


class TestLonLatToLocal:
    """Example-based tests for lon_lat_to_local."""

    def test_reference_maps_to_origin(self) -> None:
        """Test that the reference point is the local origin."""
        assert lon_lat_to_local(-79.5, 43.5, -79.5, 43.5) == (0.0, 0.0)

    def test_uses_reference_latitude_cosine(self) -> None:
        """Test the forward formula against a hand computation."""
        east, north = lon_lat_to_local(-79.5, 43.5, -79.0, 43.0)

        assert east == pytest.approx(0.5 * METERS_PER_DEGREE * math.cos(math.radians(43.5)))
        assert north == pytest.approx(-0.5 * METERS_PER_DEGREE)


class TestReferencePoint:
    """Tests for the GCP centroid."""

    def test_centroid(self) -> None:
        """Test that the reference point is the mean lon/lat."""
        gcps = [
            GCP(0, 0, -80.0, 44.0),
            GCP(100, 0, -79.0, 44.0),
            GCP(100, 100, -79.0, 43.0),
            GCP(0, 100, -80.0, 43.0),
        ]

        assert reference_point(gcps) == (-79.5, 43.5)

    def test_single_point(self) -> None:
        """Test that a single point is its own reference."""
        assert reference_point([GCP(1, 2, 3.25, -4.5)]) == (3.25, -4.5)

    def test_accepts_iterator(self) -> None:
        """Test that any iterable of lon/lat records is accepted."""
        gcps = (GCP(0, 0, lon, 10.0) for lon in (1.0, 2.0, 3.0))

        assert reference_point(gcps) == (2.0, 10.0)

    def test_empty_raises(self) -> None:
        """Test that an empty point set has no reference point."""
        with pytest.raises(ValueError, match="empty"):
            reference_point([])


class TestConversionProperties:
    """Property-based tests for the equirectangular conversion."""

    @given(ref_lon=longitude_strategy, ref_lat=latitude_strategy)
    @settings(max_examples=200)
    def test_zero_offset_round_trip_is_exact(self, ref_lon: float, ref_lat: float) -> None:
        """Property: local_to_lon_lat(ref, 0, 0) == ref exactly."""
        assert local_to_lon_lat(ref_lon, ref_lat, 0.0, 0.0) == (ref_lon, ref_lat)

    @given(
        ref_lon=longitude_strategy,
        ref_lat=latitude_strategy,
        east=offset_strategy,
        step=step_strategy,
        north=offset_strategy,
    )
    @settings(max_examples=200)
    def test_east_is_monotonic(self, ref_lon, ref_lat, east, step, north) -> None:
        """Property: increasing east strictly increases lon and leaves lat unchanged."""
        lon1, lat1 = local_to_lon_lat(ref_lon, ref_lat, east, north)
        lon2, lat2 = local_to_lon_lat(ref_lon, ref_lat, east + step, north)

        assert lon2 > lon1
        assert lat2 == lat1

    @given(
        ref_lon=longitude_strategy,
        ref_lat=latitude_strategy,
        north=offset_strategy,
        step=step_strategy,
        east=offset_strategy,
    )
    @settings(max_examples=200)
    def test_north_is_monotonic(self, ref_lon, ref_lat, north, step, east) -> None:
        """Property: increasing north strictly increases lat and leaves lon unchanged."""
        lon1, lat1 = local_to_lon_lat(ref_lon, ref_lat, east, north)
        lon2, lat2 = local_to_lon_lat(ref_lon, ref_lat, east, north + step)

        assert lat2 > lat1
        assert lon2 == lon1

    @given(
        ref_lon=longitude_strategy,
        ref_lat=latitude_strategy,
        east=offset_strategy,
        north=offset_strategy,
    )
    @settings(max_examples=200)
    def test_lon_lat_to_local_inverts(self, ref_lon, ref_lat, east, north) -> None:
        """Property: converting to lon/lat and back recovers the metric offset."""
        lon, lat = local_to_lon_lat(ref_lon, ref_lat, east, north)

        recovered = lon_lat_to_local(ref_lon, ref_lat, lon, lat)

        np.testing.assert_allclose(recovered, (east, north), rtol=1e-6, atol=1e-3)
