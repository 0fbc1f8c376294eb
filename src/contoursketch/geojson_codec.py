"""
GeoJSON reader and writer for contour feature collections.

Converts between GeoJSON text and the immutable models in ``models``.
Members the model does not know about are kept in ``extra`` so they
survive a read/write round trip.
"""

import json
import math
import numbers
from typing import Any, Dict, List, Union

from .models import (
    Coordinate,
    Feature,
    FeatureCollection,
    Geometry,
    InvalidGeoJSON,
)

GEOMETRY_KEYS = ("type", "coordinates")
FEATURE_KEYS = ("type", "geometry", "properties", "id")
COLLECTION_KEYS = ("type", "features", "bbox")


def parse_position(value: Any) -> Coordinate:
    """Parse a GeoJSON position into a tuple of floats."""
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        raise InvalidGeoJSON(f"Invalid position: {value!r}")
    for v in value:
        if isinstance(v, bool) or not isinstance(v, numbers.Real) or not math.isfinite(v):
            raise InvalidGeoJSON(f"Invalid position: {value!r}")
    return tuple(float(v) for v in value)


def geometry_from_dict(obj: Any) -> Geometry:
    if not isinstance(obj, dict) or not isinstance(obj.get("type"), str):
        raise InvalidGeoJSON(f"Invalid geometry: {obj!r}")

    extra = {k: v for k, v in obj.items() if k not in GEOMETRY_KEYS}
    coordinates = obj.get("coordinates")

    if obj["type"] == "LineString":
        if not isinstance(coordinates, list) or not coordinates:
            raise InvalidGeoJSON("LineString must have a non-empty coordinate list")
        coordinates = tuple(parse_position(p) for p in coordinates)

    return Geometry(type=obj["type"], coordinates=coordinates, extra=extra)


def feature_from_dict(obj: Any) -> Feature:
    if not isinstance(obj, dict) or obj.get("type") != "Feature":
        raise InvalidGeoJSON(f"Expected a Feature, got: {obj!r}")

    raw_geometry = obj.get("geometry")
    geometry = geometry_from_dict(raw_geometry) if raw_geometry is not None else None

    return Feature(
        geometry=geometry,
        properties=obj.get("properties"),
        id=obj.get("id"),
        extra={k: v for k, v in obj.items() if k not in FEATURE_KEYS},
    )


def feature_collection_from_dict(obj: Any) -> FeatureCollection:
    """
    Build a FeatureCollection from a decoded GeoJSON object.

    Args:
        obj: Decoded JSON value

    Returns:
        FeatureCollection preserving feature order and unknown members
    """
    if not isinstance(obj, dict) or obj.get("type") != "FeatureCollection":
        raise InvalidGeoJSON("Top-level GeoJSON object must be a FeatureCollection")

    features = obj.get("features")
    if not isinstance(features, list):
        raise InvalidGeoJSON("FeatureCollection 'features' must be a list")

    return FeatureCollection(
        features=tuple(feature_from_dict(f) for f in features),
        bbox=obj.get("bbox"),
        extra={k: v for k, v in obj.items() if k not in COLLECTION_KEYS},
    )


def reject_constant(name: str) -> None:
    # NaN and Infinity are not valid JSON
    raise InvalidGeoJSON(f"Invalid JSON constant: {name}")


def parse_feature_collection(data: Union[bytes, str]) -> FeatureCollection:
    """
    Parse GeoJSON text into a FeatureCollection.

    Args:
        data: GeoJSON content as bytes or str

    Returns:
        Parsed FeatureCollection
    """
    try:
        obj = json.loads(data, parse_constant=reject_constant)
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidGeoJSON(f"Invalid GeoJSON: {e}")
    return feature_collection_from_dict(obj)


def geometry_to_dict(geometry: Geometry) -> Dict[str, Any]:
    coordinates = geometry.coordinates
    if geometry.is_polyline:
        coordinates = [list(p) for p in coordinates]

    obj: Dict[str, Any] = {"type": geometry.type}
    if coordinates is not None:
        obj["coordinates"] = coordinates
    obj.update(geometry.extra)
    return obj


def feature_to_dict(feature: Feature) -> Dict[str, Any]:
    obj: Dict[str, Any] = {"type": "Feature"}
    if feature.id is not None:
        obj["id"] = feature.id
    obj["geometry"] = geometry_to_dict(feature.geometry) if feature.geometry is not None else None
    obj["properties"] = feature.properties
    obj.update(feature.extra)
    return obj


def feature_collection_to_dict(collection: FeatureCollection) -> Dict[str, Any]:
    obj: Dict[str, Any] = {"type": "FeatureCollection"}
    obj.update(collection.extra)
    if collection.bbox is not None:
        obj["bbox"] = collection.bbox
    features: List[Dict[str, Any]] = [feature_to_dict(f) for f in collection.features]
    obj["features"] = features
    return obj


def dump_feature_collection(collection: FeatureCollection) -> bytes:
    """Serialize a FeatureCollection to GeoJSON bytes."""
    return json.dumps(feature_collection_to_dict(collection)).encode("utf-8")
