"""Tests for effective-area polyline simplification."""

import math

import pytest

from contoursketch.geojson_codec import feature_collection_from_dict
from contoursketch.models import Geometry, MissingGeometry
from contoursketch.simplify_geojson import (
    simplify,
    simplify_geometry,
    simplify_polyline,
    triangle_area,
    vertex_count,
)

from conftest import line_feature


def wiggly_line(n=40):
    return [(float(i), math.sin(i * 0.7) * (i % 3)) for i in range(n)]


class TestTriangleArea:
    """Test cases for triangle_area function."""

    def test_right_triangle(self):
        assert triangle_area((0, 0), (4, 0), (0, 3)) == 6.0

    def test_collinear_points(self):
        assert triangle_area((0, 0), (1, 1), (2, 2)) == 0.0

    def test_ignores_extra_ordinates(self):
        assert triangle_area((0, 0, 10), (4, 0, 20), (0, 3, 30)) == 6.0


class TestSimplifyPolyline:
    """Test cases for simplify_polyline function."""

    def test_zero_tolerance_removes_collinear_points(self):
        """Exactly collinear interior points have zero area."""
        coords = [(0, 0), (1, 0), (2, 0), (3, 0)]

        assert simplify_polyline(coords, 0) == [(0, 0), (3, 0)]

    def test_zero_tolerance_keeps_shape(self):
        coords = [(0, 0), (1, 1), (2, 0), (3, 1)]

        assert simplify_polyline(coords, 0) == coords

    def test_short_polyline_unchanged(self):
        """Polylines with no interior vertex are returned as-is."""
        assert simplify_polyline([(0, 0), (5, 5)], 1e9) == [(0, 0), (5, 5)]
        assert simplify_polyline([(1, 2)], 1e9) == [(1, 2)]

    def test_large_tolerance_keeps_only_endpoints(self):
        coords = wiggly_line()

        assert simplify_polyline(coords, 1e9) == [coords[0], coords[-1]]

    def test_neighbour_areas_recomputed(self):
        """Removing a vertex enlarges its neighbour's area past the threshold."""
        coords = [(0, 0), (1, 0.1), (2, 0), (3, 5), (4, 0)]

        # (2, 0) starts at area 2.55 but grows to 5.0 once (1, 0.1) is gone
        assert simplify_polyline(coords, 3) == [(0, 0), (2, 0), (3, 5), (4, 0)]

    def test_endpoints_preserved(self):
        coords = wiggly_line()

        for tolerance in (0, 0.1, 1, 100):
            result = simplify_polyline(coords, tolerance)
            assert result[0] == coords[0]
            assert result[-1] == coords[-1]

    def test_order_preserved(self):
        coords = wiggly_line()

        result = simplify_polyline(coords, 0.5)

        indexes = [coords.index(p) for p in result]
        assert indexes == sorted(indexes)

    def test_idempotent(self):
        coords = wiggly_line()

        for tolerance in (0, 0.01, 0.1, 0.5, 2):
            once = simplify_polyline(coords, tolerance)
            assert simplify_polyline(once, tolerance) == once

    def test_monotonic_reduction(self):
        coords = wiggly_line()
        tolerances = [0, 0.01, 0.1, 0.5, 2, 10]

        counts = [len(simplify_polyline(coords, t)) for t in tolerances]

        assert counts[0] <= len(coords)
        assert counts == sorted(counts, reverse=True)

    def test_input_not_modified(self):
        coords = [(0, 0), (1, 0), (2, 0)]

        simplify_polyline(coords, 1)

        assert coords == [(0, 0), (1, 0), (2, 0)]

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValueError):
            simplify_polyline([(0, 0), (1, 1), (2, 0)], -1)


class TestSimplifyGeometry:
    """Test cases for simplify_geometry function."""

    def test_other_kinds_pass_through(self):
        polygon = Geometry(type="Polygon", coordinates=[[[0, 0], [1, 0], [2, 0], [0, 0]]])

        assert simplify_geometry(polygon, 100) is polygon

    def test_line_string_simplified(self):
        geometry = Geometry(type="LineString", coordinates=((0.0, 0.0), (1.0, 0.0), (2.0, 0.0)))

        result = simplify_geometry(geometry, 0)

        assert result.coordinates == ((0.0, 0.0), (2.0, 0.0))
        assert result.type == "LineString"


class TestSimplifyCollection:
    """Test cases for simplify function."""

    def test_attributes_and_order_preserved(self, contour_collection):
        result = simplify(contour_collection, 1)

        assert len(result.features) == len(contour_collection.features)
        for before, after in zip(contour_collection.features, result.features):
            assert after.properties == before.properties
        assert [f.properties["ID"] for f in result.features] == [0, 1]

    def test_collection_members_preserved(self, contour_collection):
        result = simplify(contour_collection, 1)

        assert result.extra == {"name": "contours"}

    def test_input_collection_unchanged(self, contour_collection):
        before = contour_collection.features[0].geometry.coordinates

        simplify(contour_collection, 1)

        assert contour_collection.features[0].geometry.coordinates == before
        assert len(before) == 5

    def test_point_feature_passes_through(self):
        collection = feature_collection_from_dict({
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 2]}, "properties": {}},
                line_feature([(0, 0), (1, 0), (2, 0)]),
            ],
        })

        result = simplify(collection, 0)

        assert result.features[0] == collection.features[0]
        assert len(result.features[1].geometry.coordinates) == 2

    def test_missing_geometry_fails_whole_batch(self):
        collection = feature_collection_from_dict({
            "type": "FeatureCollection",
            "features": [
                line_feature([(0, 0), (1, 0), (2, 0)]),
                {"type": "Feature", "geometry": None, "properties": {"elev": 5}},
            ],
        })

        with pytest.raises(MissingGeometry) as excinfo:
            simplify(collection, 0)

        assert excinfo.value.index == 1

    def test_vertex_count(self, contour_collection):
        assert vertex_count(contour_collection) == 7
        assert vertex_count(simplify(contour_collection, 1)) == 4

    def test_collection_idempotent_and_monotonic(self, contour_collection):
        light = simplify(contour_collection, 0.001)
        heavy = simplify(contour_collection, 1)

        assert simplify(light, 0.001) == light
        assert vertex_count(heavy) <= vertex_count(light) <= vertex_count(contour_collection)
