"""
Writers for rendered contours.

Serializes a Drawing to SVG and a contour FeatureCollection to DXF, and
provides the GeoJSON -> SVG/DXF conversions used by the web service.
"""

import logging
import numbers
import xml.etree.ElementTree as ET
from io import StringIO
from typing import Optional

import ezdxf

from . import config
from .geojson_codec import parse_feature_collection
from .models import Drawing, DrawingPath, FeatureCollection
from .render import render

logger = logging.getLogger(__name__)

# SVG namespace
SVG_NS = "http://www.w3.org/2000/svg"


def format_number(value: float) -> str:
    """Format a coordinate without a trailing '.0' for whole numbers."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def path_to_d(path: DrawingPath) -> str:
    """Convert a drawing path to an SVG path 'd' attribute."""
    return " ".join(
        f"{op} {format_number(x)},{format_number(y)}" for op, (x, y) in path.operations()
    )


def drawing_to_svg(drawing: Drawing) -> bytes:
    """
    Convert a drawing to SVG format.

    Args:
        drawing: Rendered drawing

    Returns:
        SVG file content as bytes
    """
    ET.register_namespace('', SVG_NS)

    root = ET.Element('svg')
    root.set('xmlns', SVG_NS)
    root.set('viewBox', " ".join(format_number(v) for v in drawing.view_box))
    root.set('width', format_number(drawing.width))
    root.set('height', format_number(drawing.height))

    for path in drawing.paths:
        path_elem = ET.SubElement(root, 'path')
        path_elem.set('fill', path.style.fill)
        path_elem.set('stroke', path.style.stroke)
        path_elem.set('stroke-width', format_number(path.style.stroke_width))
        path_elem.set('d', path_to_d(path))

    output = '<?xml version="1.0" encoding="UTF-8"?>\n'
    output += ET.tostring(root, encoding='unicode')
    return output.encode('utf-8')


def collection_to_dxf(collection: FeatureCollection, elevation_key: str = config.ELEVATION_KEY) -> bytes:
    """
    Convert contour LineStrings to DXF format.

    Each LineString with at least two points becomes an LWPOLYLINE on the
    contour layer. A numeric ``elevation_key`` property is written as the
    polyline elevation.

    Args:
        collection: Contour feature collection
        elevation_key: Property holding the contour elevation

    Returns:
        DXF file content as bytes
    """
    doc = ezdxf.new(dxfversion=config.DXF_VERSION)
    doc.layers.add(config.DXF_LAYER)
    msp = doc.modelspace()

    for feature in collection.features:
        if feature.geometry is None or not feature.geometry.is_polyline:
            continue

        points = [(p[0], p[1]) for p in feature.geometry.coordinates]
        if len(points) < 2:
            continue

        dxfattribs = {"layer": config.DXF_LAYER}
        elevation = (feature.properties or {}).get(elevation_key)
        if isinstance(elevation, numbers.Real) and not isinstance(elevation, bool):
            dxfattribs["elevation"] = float(elevation)

        msp.add_lwpolyline(points, format="xy", dxfattribs=dxfattribs)

    # ezdxf writes strings, so we use StringIO and encode
    output_stream = StringIO()
    doc.write(output_stream)
    return output_stream.getvalue().encode('utf-8')


def geojson_to_svg_bytes(
    input_bytes: bytes,
    width: float = config.CANVAS_WIDTH,
    height: float = config.CANVAS_HEIGHT,
) -> bytes:
    """Render GeoJSON contour content to SVG bytes."""
    collection = parse_feature_collection(input_bytes)
    return drawing_to_svg(render(collection, width, height))


def geojson_to_svg(
    input_file: str,
    output_file: str,
    width: float = config.CANVAS_WIDTH,
    height: float = config.CANVAS_HEIGHT,
) -> None:
    """
    Render a GeoJSON contour file to an SVG file.

    Args:
        input_file: Path to input GeoJSON file
        output_file: Path to output SVG file
        width: Canvas width
        height: Canvas height
    """
    with open(input_file, 'rb') as f:
        input_bytes = f.read()

    output_bytes = geojson_to_svg_bytes(input_bytes, width, height)

    with open(output_file, 'wb') as f:
        f.write(output_bytes)

    logger.info("Generated contour drawing at: %s", output_file)


def geojson_to_dxf(input_bytes: bytes, elevation_key: Optional[str] = None) -> bytes:
    """Convert GeoJSON contour content to DXF bytes."""
    collection = parse_feature_collection(input_bytes)
    return collection_to_dxf(collection, elevation_key or config.ELEVATION_KEY)
