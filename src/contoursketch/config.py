"""
Default settings for contour simplification and rendering.

Server host/port and the default tolerance can be overridden with
CONTOURSKETCH_HOST, CONTOURSKETCH_PORT and CONTOURSKETCH_TOLERANCE.
"""

import os


# ---------------------------------------------------------------
# SIMPLIFICATION
# ---------------------------------------------------------------

# Effective-area threshold, in squared source units (degrees for EPSG:4326)
DEFAULT_TOLERANCE = float(os.environ.get("CONTOURSKETCH_TOLERANCE", "1e-9"))


# ---------------------------------------------------------------
# RENDERING
# ---------------------------------------------------------------

CANVAS_WIDTH = 1000.0
CANVAS_HEIGHT = 600.0

STROKE_COLOR = "black"
STROKE_WIDTH = 1


# ---------------------------------------------------------------
# DXF EXPORT
# ---------------------------------------------------------------

DXF_VERSION = "R2000"
DXF_LAYER = "CONTOURS"

# Property written by gdal_contour -a elev
ELEVATION_KEY = "elev"


# ---------------------------------------------------------------
# WEB SERVICE
# ---------------------------------------------------------------

HOST = os.environ.get("CONTOURSKETCH_HOST", "127.0.0.1")
PORT = int(os.environ.get("CONTOURSKETCH_PORT", "8000"))

SUPPORTED_EXTENSIONS = (".geojson", ".json")
