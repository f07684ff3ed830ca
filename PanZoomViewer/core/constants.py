"""Application-wide constants for PanZoomViewer.

This module contains shared constants used across the application.
Scale values follow the Viewer convention: image units per viewer pixel,
so a smaller scale means a more magnified view.
"""

# Zoom step coefficients (geometric progression, ZOOM_OUT_COEF == 1 / ZOOM_IN_COEF)
ZOOM_IN_COEF = 2.0 / 3.0
ZOOM_OUT_COEF = 1.0 / ZOOM_IN_COEF  # 1.5

# Breathing room used by the "fit" action (1.0 = exact fit)
DEFAULT_FIT_MARGIN = 1.1

# Scale limits enforced by the UI before applying a zoom step
MIN_SCALE = 1.0 / 64.0  # 64x magnification
MAX_SCALE = 64.0  # 1/64x

# One notch of a standard mouse wheel (QWheelEvent.angleDelta units)
WHEEL_STEP = 120

# Navigator thumbnail edge length in pixels
THUMBNAIL_SIZE = 200
