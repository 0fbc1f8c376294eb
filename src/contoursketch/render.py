"""
Contour renderer - Scales LineString features into a fixed-size drawing.

The bounding box of all LineString coordinates is mapped onto a canvas of
the requested size. Source y grows upwards (geographic) while canvas y grows
downwards, so the vertical axis is flipped.
"""

from typing import Optional

from . import config
from .models import (
    BoundingBox,
    DegenerateAxis,
    Drawing,
    DrawingPath,
    EmptyGeometry,
    FeatureCollection,
    PathStyle,
)


def compute_bounds(collection: FeatureCollection) -> Optional[BoundingBox]:
    """
    Calculate the bounding box of all LineString coordinates.

    Returns:
        BoundingBox, or None if the collection has no LineString coordinates
    """
    all_points = [p for polyline in collection.polylines() for p in polyline]
    if not all_points:
        return None

    return BoundingBox(
        min_x=min(p[0] for p in all_points),
        min_y=min(p[1] for p in all_points),
        max_x=max(p[0] for p in all_points),
        max_y=max(p[1] for p in all_points),
    )


def axis_scale(size: float, extent: float, axis: str, strict: bool) -> float:
    # A zero extent cannot be stretched to fill the canvas; keep source units
    if extent == 0:
        if strict:
            raise DegenerateAxis(axis)
        return 1.0
    return size / extent


def default_style() -> PathStyle:
    return PathStyle(stroke=config.STROKE_COLOR, stroke_width=config.STROKE_WIDTH)


def render(
    collection: FeatureCollection,
    canvas_width: float = config.CANVAS_WIDTH,
    canvas_height: float = config.CANVAS_HEIGHT,
    style: Optional[PathStyle] = None,
    strict: bool = False,
) -> Drawing:
    """
    Render the LineString features of a collection as stroked paths.

    A degenerate axis (all points share the same x or y) uses a scale of
    1.0 unless ``strict`` is set, in which case DegenerateAxis is raised.
    A single point therefore lands at (0, canvas_height).

    Args:
        collection: Feature collection to draw
        canvas_width: Output canvas width
        canvas_height: Output canvas height
        style: Stroke style shared by every path
        strict: Raise on a degenerate bounding box instead of falling back

    Returns:
        Drawing with one path per LineString feature, in feature order

    Raises:
        EmptyGeometry: if there are no LineString coordinates
        DegenerateAxis: in strict mode, if an axis has zero extent
    """
    if not (canvas_width > 0 and canvas_height > 0):
        raise ValueError(f"Canvas size must be positive, got {canvas_width}x{canvas_height}")

    bounds = compute_bounds(collection)
    if bounds is None:
        raise EmptyGeometry()

    scale_x = axis_scale(canvas_width, bounds.width, "x", strict)
    scale_y = axis_scale(canvas_height, bounds.height, "y", strict)
    style = style or default_style()

    paths = []
    for polyline in collection.polylines():
        points = tuple(
            (
                (p[0] - bounds.min_x) * scale_x,
                canvas_height - (p[1] - bounds.min_y) * scale_y,  # Flip y-axis
            )
            for p in polyline
        )
        paths.append(DrawingPath(points=points, style=style))

    return Drawing(width=canvas_width, height=canvas_height, paths=tuple(paths))
