"""Raster decode/encode for logo processing.

Images are read with OpenCV and handed around as 8-bit RGBA numpy arrays
wrapped in `RasterImage`. Output is always PNG so the alpha channel survives.
"""

from __future__ import annotations

import os

import cv2
import numpy as np

from .errors import DecodeError, NotFoundError, WriteError
from .model import RasterImage


def _to_rgba(arr: np.ndarray, path: str) -> np.ndarray:
    if arr.dtype == np.uint16:
        arr = (arr >> 8).astype(np.uint8)
    elif arr.dtype != np.uint8:
        raise DecodeError(path, f"Unsupported sample type {arr.dtype}")

    if arr.ndim == 2:
        return cv2.cvtColor(arr, cv2.COLOR_GRAY2RGBA)
    channels = arr.shape[2]
    if channels == 1:
        return cv2.cvtColor(arr[:, :, 0], cv2.COLOR_GRAY2RGBA)
    if channels == 3:
        return cv2.cvtColor(arr, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)
    raise DecodeError(path, f"Unsupported channel count {channels}")


def decode(path: str) -> RasterImage:
    """Load an image file as RGBA.

    Doxygen:
    - @param path: Path to a raster image (JPEG, PNG, ...).
    - @return: `RasterImage` owning a fresh (H, W, 4) uint8 buffer.
    - @throws NotFoundError: If `path` does not exist.
    - @throws DecodeError: If the file is not a decodable raster.
    """
    if not os.path.exists(path):
        raise NotFoundError(path, "File not found")

    arr = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if arr is None:
        raise DecodeError(path, "Failed to decode image")
    return RasterImage(pixels=_to_rgba(arr, path))


def encode(image: RasterImage, path: str) -> None:
    """Write `image` to `path` as PNG, replacing any existing file.

    Doxygen:
    - @param image: RGBA raster to save.
    - @param path: Destination file path; its parent directory must exist.
    - @throws WriteError: If encoding fails or the file cannot be written.
    """
    bgra = cv2.cvtColor(image.pixels, cv2.COLOR_RGBA2BGRA)
    ok, buf = cv2.imencode(".png", bgra)
    if not ok:
        raise WriteError(path, "Failed to encode PNG")
    try:
        with open(path, "wb") as f:
            f.write(buf.tobytes())
    except OSError as e:
        raise WriteError(path, f"Cannot write file: {e.strerror or e}") from e
