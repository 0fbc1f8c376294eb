"""
Data model for contour feature collections and drawings.

Everything here is immutable: simplification and rendering build new
objects instead of editing the ones they were given.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Type aliases
Coordinate = Tuple[float, ...]
Point = Tuple[float, float]

LINE_STRING = "LineString"


class ContourError(ValueError):
    """Base exception for contour processing errors."""

    pass


class MissingGeometry(ContourError):
    """Raised when a feature has no geometry where one is required."""

    def __init__(self, index: int):
        super().__init__(f"Feature {index} has no geometry")
        self.index = index


class EmptyGeometry(ContourError):
    """Raised when a collection has no coordinates to render."""

    def __init__(self, message: str = "No LineString coordinates found. Nothing to render."):
        super().__init__(message)


class DegenerateAxis(ContourError):
    """Raised in strict rendering when the bounding box has zero extent on an axis."""

    def __init__(self, axis: str):
        super().__init__(f"Bounding box has zero extent along the {axis} axis")
        self.axis = axis


class InvalidGeoJSON(ContourError):
    """Raised when input cannot be read as a GeoJSON FeatureCollection."""

    pass


@dataclass(frozen=True)
class Geometry:
    type: str
    coordinates: Any
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_polyline(self) -> bool:
        return self.type == LINE_STRING


@dataclass(frozen=True)
class Feature:
    geometry: Optional[Geometry]
    properties: Optional[Dict[str, Any]] = field(default_factory=dict)
    id: Any = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FeatureCollection:
    features: Tuple[Feature, ...] = ()
    bbox: Optional[List[float]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def polylines(self) -> List[List[Coordinate]]:
        """Coordinates of every LineString feature, in feature order."""
        return [
            list(f.geometry.coordinates)
            for f in self.features
            if f.geometry is not None and f.geometry.is_polyline
        ]


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class PathStyle:
    stroke: str = "black"
    stroke_width: float = 1
    fill: str = "none"


@dataclass(frozen=True)
class DrawingPath:
    points: Tuple[Point, ...]
    style: PathStyle = PathStyle()

    def operations(self) -> List[Tuple[str, Point]]:
        """Move to the first point, then a line to every following point."""
        return [("M" if i == 0 else "L", p) for i, p in enumerate(self.points)]


@dataclass(frozen=True)
class Drawing:
    width: float
    height: float
    paths: Tuple[DrawingPath, ...] = ()

    @property
    def view_box(self) -> Tuple[float, float, float, float]:
        return (0, 0, self.width, self.height)
