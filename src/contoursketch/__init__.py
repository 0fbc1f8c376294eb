"""
Contour Sketch - Simplify elevation contours and draw them.

This package simplifies GeoJSON contour lines with effective-area point
removal and renders them as scaled SVG line drawings.
"""

__version__ = "0.1.0"

from .models import (
    BoundingBox,
    ContourError,
    DegenerateAxis,
    Drawing,
    DrawingPath,
    EmptyGeometry,
    Feature,
    FeatureCollection,
    Geometry,
    InvalidGeoJSON,
    MissingGeometry,
    PathStyle,
)
from .simplify_geojson import simplify, simplify_polyline, simplify_geojson, simplify_geojson_bytes
from .render import compute_bounds, render
from .converter import drawing_to_svg, collection_to_dxf, geojson_to_dxf, geojson_to_svg, geojson_to_svg_bytes
from .geojson_codec import parse_feature_collection, dump_feature_collection

__all__ = [
    "BoundingBox",
    "ContourError",
    "DegenerateAxis",
    "Drawing",
    "DrawingPath",
    "EmptyGeometry",
    "Feature",
    "FeatureCollection",
    "Geometry",
    "InvalidGeoJSON",
    "MissingGeometry",
    "PathStyle",
    "simplify",
    "simplify_polyline",
    "simplify_geojson",
    "simplify_geojson_bytes",
    "compute_bounds",
    "render",
    "drawing_to_svg",
    "collection_to_dxf",
    "geojson_to_dxf",
    "geojson_to_svg",
    "geojson_to_svg_bytes",
    "parse_feature_collection",
    "dump_feature_collection",
]
