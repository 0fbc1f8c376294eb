"""
Contour Sketch Web Application.

A FastAPI web server that accepts an uploaded GeoJSON contour file,
simplifies it, renders it to SVG and DXF, and returns a ZIP download.
"""

import io
import json
import logging
import zipfile
from pathlib import Path
from typing import Dict, Tuple

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from . import __version__, config
from .converter import collection_to_dxf, drawing_to_svg
from .geojson_codec import dump_feature_collection, parse_feature_collection
from .render import render
from .simplify_geojson import simplify, vertex_count

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Contour Sketch",
    description="Simplify GeoJSON elevation contours and render them as SVG and DXF",
    version=__version__,
)


def build_outputs(
    content: bytes,
    tolerance: float,
    width: float,
    height: float,
) -> Tuple[Dict[str, bytes], dict]:
    """
    Run the contour pipeline on uploaded GeoJSON content.

    Returns:
        Tuple of (output bytes keyed by format, statistics dict)
    """
    collection = parse_feature_collection(content)
    simplified = simplify(collection, tolerance)
    drawing = render(simplified, width, height)

    original_vertices = vertex_count(collection)
    simplified_vertices = vertex_count(simplified)
    stats = {
        "feature_count": len(collection.features),
        "path_count": len(drawing.paths),
        "original_vertex_count": original_vertices,
        "simplified_vertex_count": simplified_vertices,
        "reduction_ratio": original_vertices / simplified_vertices if simplified_vertices else 0,
    }

    outputs = {
        "geojson": dump_feature_collection(simplified),
        "svg": drawing_to_svg(drawing),
        "dxf": collection_to_dxf(simplified),
    }
    return outputs, stats


@app.post("/simplify")
async def simplify_file(
    file: UploadFile = File(...),
    tolerance: float = Query(config.DEFAULT_TOLERANCE, ge=0),
    width: float = Query(config.CANVAS_WIDTH, gt=0),
    height: float = Query(config.CANVAS_HEIGHT, gt=0),
):
    """
    Simplify an uploaded GeoJSON contour file.

    Returns a ZIP file containing the simplified GeoJSON plus SVG and DXF drawings.
    """
    filename = file.filename or "unknown"
    ext = Path(filename).suffix.lower()

    if ext not in config.SUPPORTED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail="Unsupported file format. Please upload a .geojson or .json file."
        )

    content = await file.read()

    if not content:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    try:
        outputs, stats = build_outputs(content, tolerance, width, height)
    except ValueError as e:
        logger.warning("Rejected %s: %s", filename, e)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Error processing %s", filename)
        raise HTTPException(
            status_code=500,
            detail=f"Error processing file: {str(e)}"
        )

    logger.info(
        "Processed %s: %d -> %d vertices, %d paths",
        filename, stats["original_vertex_count"], stats["simplified_vertex_count"], stats["path_count"],
    )

    zip_buffer = io.BytesIO()
    base_name = Path(filename).stem

    with zipfile.ZipFile(zip_buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(f"{base_name}_simplified.geojson", outputs["geojson"])
        zf.writestr(f"{base_name}_contours.svg", outputs["svg"])
        zf.writestr(f"{base_name}_contours.dxf", outputs["dxf"])

    zip_buffer.seek(0)

    headers = {
        "Content-Disposition": f'attachment; filename="{base_name}_contours.zip"',
        "X-Stats": json.dumps(stats)
    }

    return StreamingResponse(
        zip_buffer,
        media_type="application/zip",
        headers=headers
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "contoursketch"}


def main():
    """Run the application with uvicorn."""
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
