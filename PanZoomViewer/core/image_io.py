"""Image I/O utilities for loading and converting images.

This module provides functions for:
- Loading images from files (OpenCV, NumPy)
- Converting NumPy arrays to QImage for Qt display
- Validating image file extensions
- Reading the content size a Viewer is fitted to

All functions are UI-independent apart from producing QImage objects.
"""

from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np
from PySide6.QtGui import QImage

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".gif", ".webp")
SUPPORTED_EXTENSIONS = IMAGE_EXTENSIONS + (".npy",)


def numpy_to_qimage(arr: np.ndarray) -> QImage:
    """Convert a NumPy array to a QImage for display.

    Accepts 2-D grayscale arrays and 3-D arrays with 1, 3 or 4 channels.
    Floating point data is assumed to be in [0, 1] and is scaled to 8 bit.
    The returned QImage owns a copy of the pixel data.

    Args:
        arr: Image array of shape (H, W) or (H, W, C)

    Returns:
        QImage (empty if ``arr`` is None or empty)

    Raises:
        ValueError: If the array has an unsupported number of dimensions.
    """
    if arr is None or arr.size == 0:
        return QImage()
    a = arr
    if np.issubdtype(a.dtype, np.floating):
        a = a * 255.0
    if a.ndim == 3 and a.shape[2] == 1:
        a = a[..., 0]
    if a.ndim == 2:
        disp = np.ascontiguousarray(np.clip(a, 0, 255).astype(np.uint8))
        h, w = disp.shape
        return QImage(disp.data, w, h, w, QImage.Format_Grayscale8).copy()
    elif a.ndim == 3:
        h, w, c = a.shape
        disp = np.ascontiguousarray(np.clip(a, 0, 255).astype(np.uint8))
        if c == 3:
            return QImage(disp.data, w, h, 3 * w, QImage.Format_RGB888).copy()
        elif c == 4:
            return QImage(disp.data, w, h, 4 * w, QImage.Format_RGBA8888).copy()
        gray = np.ascontiguousarray(np.clip(a.mean(axis=2), 0, 255).astype(np.uint8))
        return QImage(gray.data, w, h, w, QImage.Format_Grayscale8).copy()
    raise ValueError("Unsupported array shape")


def cv2_imread_unicode(path: str):
    data = np.fromfile(path, dtype=np.uint8)
    return cv2.imdecode(data, cv2.IMREAD_UNCHANGED)


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Load an image file into a NumPy array.

    Supported inputs:
      - .npy: loaded via numpy.load and returned as-is.
      - common LDR formats: read with OpenCV. Color images are converted
        to RGB or RGBA (OpenCV's BGR/BGRA → RGB/RGBA). Grayscale images are
        returned as 2-D arrays.

    Args:
        path: Path to the image file (str or pathlib.Path).

    Returns:
        np.ndarray: Image data.

    Raises:
        RuntimeError: If the file cannot be decoded or has an unsupported suffix.
        ValueError: If the loaded array is not 2-D or 3-D or has
            zero width or height.
    """
    path_str = str(path)
    ext = Path(path_str).suffix.lower()

    if ext == ".npy":
        arr = np.load(path_str)
    elif ext in IMAGE_EXTENSIONS:
        arr = cv2_imread_unicode(path_str)
        if arr is None:
            raise RuntimeError(f"Cannot open image: {path_str}")
        if arr.ndim == 3 and arr.shape[2] == 4:
            arr = cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)
        elif arr.ndim == 3 and arr.shape[2] == 3:
            arr = cv2.cvtColor(arr, cv2.COLOR_BGR2RGB)
    else:
        raise RuntimeError(f"Cannot open image: {path_str} (unsupported format)")

    if arr.ndim not in (2, 3):
        raise ValueError(f"Expected a 2-D or 3-D array, got shape {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError(f"Image has no pixels: shape {arr.shape}")
    return arr


def is_image_file(path: Union[str, Path]) -> bool:
    """Return True if the given path has a supported image file suffix.

    This is a lightweight check that relies solely on the filename suffix
    (case-insensitive). It does not attempt to open the file.
    """
    return Path(str(path)).suffix.lower() in SUPPORTED_EXTENSIONS


def image_size(arr: np.ndarray) -> Tuple[int, int]:
    """Return (width, height) of an image array."""
    h, w = arr.shape[:2]
    return (int(w), int(h))
