"""Pytest configuration and fixtures."""

import json

import pytest

from contoursketch.geojson_codec import feature_collection_from_dict


def line_feature(coords, **properties):
    """Build a GeoJSON LineString feature dict."""
    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": [list(c) for c in coords]},
        "properties": properties,
    }


@pytest.fixture
def contour_dict():
    """Two contour lines as produced by gdal_contour -a elev."""
    return {
        "type": "FeatureCollection",
        "name": "contours",
        "features": [
            line_feature([(0, 0), (1, 0.01), (2, 0), (3, 0.01), (4, 0)], ID=0, elev=100.0),
            line_feature([(0, 1), (4, 2)], ID=1, elev=110.0),
        ],
    }


@pytest.fixture
def contour_collection(contour_dict):
    return feature_collection_from_dict(contour_dict)


@pytest.fixture
def contour_bytes(contour_dict):
    return json.dumps(contour_dict).encode("utf-8")
