"""
GeoJSON Contour Simplifier - Reduces vertex counts of LineString features.

This module applies Visvalingam-Whyatt effective-area point removal to every
LineString in a FeatureCollection, leaving attributes, feature order and all
other geometry kinds exactly as they were.
"""

import heapq
import logging
from dataclasses import replace
from typing import List, Sequence, Tuple

from .geojson_codec import dump_feature_collection, parse_feature_collection
from .models import Coordinate, FeatureCollection, Geometry, MissingGeometry

logger = logging.getLogger(__name__)


def triangle_area(a: Coordinate, b: Coordinate, c: Coordinate) -> float:
    """Area of the triangle formed by three points (x and y only)."""
    return abs((b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])) / 2.0


def check_tolerance(tolerance: float) -> None:
    if not tolerance >= 0:
        raise ValueError(f"Tolerance must be >= 0, got {tolerance}")


def simplify_polyline(coords: Sequence[Coordinate], tolerance: float) -> List[Coordinate]:
    """
    Simplify a polyline by effective-area point removal.

    Repeatedly removes the interior vertex whose triangle with its current
    neighbours has the smallest area, as long as that area is <= tolerance.
    Endpoints are always kept. Equal areas are resolved by lower index, so
    the removal order is deterministic.

    Args:
        coords: Ordered polyline coordinates
        tolerance: Area threshold (>= 0)

    Returns:
        New list of the surviving coordinates, in original order
    """
    check_tolerance(tolerance)

    n = len(coords)
    if n <= 2:
        return list(coords)

    # Index arena: neighbours are tracked by position, not by node objects
    prev = list(range(-1, n - 1))
    nxt = list(range(1, n + 1))
    removed = [False] * n
    areas = [float("inf")] * n

    heap: List[Tuple[float, int]] = []
    for i in range(1, n - 1):
        areas[i] = triangle_area(coords[i - 1], coords[i], coords[i + 1])
        heap.append((areas[i], i))
    heapq.heapify(heap)

    while heap:
        area, i = heapq.heappop(heap)

        # Skip entries invalidated by an earlier removal
        if removed[i] or area != areas[i]:
            continue

        if area > tolerance:
            break

        removed[i] = True
        before, after = prev[i], nxt[i]
        nxt[before] = after
        prev[after] = before

        for j in (before, after):
            if 0 < j < n - 1:
                areas[j] = triangle_area(coords[prev[j]], coords[j], coords[nxt[j]])
                heapq.heappush(heap, (areas[j], j))

    return [c for c, gone in zip(coords, removed) if not gone]


def simplify_geometry(geometry: Geometry, tolerance: float) -> Geometry:
    """Simplify a LineString geometry; any other kind is returned unchanged."""
    if not geometry.is_polyline:
        return geometry
    return replace(geometry, coordinates=tuple(simplify_polyline(geometry.coordinates, tolerance)))


def simplify(collection: FeatureCollection, tolerance: float) -> FeatureCollection:
    """
    Simplify every LineString feature of a collection.

    Args:
        collection: Input feature collection (left untouched)
        tolerance: Area threshold (>= 0)

    Returns:
        New FeatureCollection with the same features, order and attributes

    Raises:
        MissingGeometry: if any feature has no geometry; nothing is returned
    """
    check_tolerance(tolerance)

    features = []
    for index, feature in enumerate(collection.features):
        if feature.geometry is None:
            raise MissingGeometry(index)
        features.append(replace(feature, geometry=simplify_geometry(feature.geometry, tolerance)))

    return replace(collection, features=tuple(features))


def vertex_count(collection: FeatureCollection) -> int:
    """Total number of LineString vertices in a collection."""
    return sum(len(coords) for coords in collection.polylines())


def simplify_geojson_bytes(input_bytes: bytes, tolerance: float) -> Tuple[bytes, dict]:
    """
    Simplify a GeoJSON FeatureCollection from bytes.

    Args:
        input_bytes: Input GeoJSON content as bytes
        tolerance: Area threshold (>= 0)

    Returns:
        Tuple of (simplified GeoJSON bytes, statistics dict)
    """
    collection = parse_feature_collection(input_bytes)
    simplified = simplify(collection, tolerance)

    original_vertices = vertex_count(collection)
    simplified_vertices = vertex_count(simplified)

    stats = {
        "feature_count": len(collection.features),
        "polyline_count": len(collection.polylines()),
        "original_vertex_count": original_vertices,
        "simplified_vertex_count": simplified_vertices,
        "reduction_ratio": original_vertices / simplified_vertices if simplified_vertices else 0,
    }

    return dump_feature_collection(simplified), stats


def simplify_geojson(input_file: str, output_file: str, tolerance: float) -> dict:
    """
    Simplify a GeoJSON contour file.

    Args:
        input_file: Path to input GeoJSON file
        output_file: Path to output GeoJSON file
        tolerance: Area threshold (>= 0)

    Returns:
        Statistics dictionary
    """
    with open(input_file, 'rb') as f:
        input_bytes = f.read()

    output_bytes, stats = simplify_geojson_bytes(input_bytes, tolerance)

    with open(output_file, 'wb') as f:
        f.write(output_bytes)

    logger.info(
        "Simplified %s: %d -> %d vertices",
        input_file, stats["original_vertex_count"], stats["simplified_vertex_count"],
    )
    return stats
