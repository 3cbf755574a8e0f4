"""Logo pixel rules: near-white background removal and dark-to-white inversion.

Rules, first match wins:
1. every RGB channel above NEAR_WHITE_THRESHOLD -> alpha 0
2. inversion enabled and every RGB channel below NEAR_BLACK_THRESHOLD -> RGB white
3. anything else (blue and other accent colours included) is left as is

The transform is meant to run once per image: a pixel inverted to white by
rule 2 would match rule 1 on a second pass.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

# Exclusive bounds on every RGB channel
NEAR_WHITE_THRESHOLD = 220
NEAR_BLACK_THRESHOLD = 80

BACKGROUND = "background"
DARK = "dark"
UNCHANGED = "unchanged"

Pixel = Tuple[int, int, int, int]


def classify_pixel(r: int, g: int, b: int, keep_original_colors: bool = False) -> str:
    """Return which rule applies to one pixel.

    Doxygen:
    - @param r, g, b: 8-bit channel values.
    - @param keep_original_colors: Disable the dark-to-white rule.
    - @return: One of BACKGROUND, DARK, UNCHANGED.
    """
    if r > NEAR_WHITE_THRESHOLD and g > NEAR_WHITE_THRESHOLD and b > NEAR_WHITE_THRESHOLD:
        return BACKGROUND
    if not keep_original_colors and r < NEAR_BLACK_THRESHOLD and g < NEAR_BLACK_THRESHOLD and b < NEAR_BLACK_THRESHOLD:
        return DARK
    return UNCHANGED


def transform_pixel(pixel: Pixel, keep_original_colors: bool = False) -> Pixel:
    """Apply the logo rules to a single (r, g, b, a) tuple."""
    r, g, b, a = pixel
    kind = classify_pixel(r, g, b, keep_original_colors)
    if kind == BACKGROUND:
        return (r, g, b, 0)
    if kind == DARK:
        return (255, 255, 255, a)
    return (r, g, b, a)


def remove_background(pixels: np.ndarray, keep_original_colors: bool = False) -> np.ndarray:
    """Apply the logo rules to a whole RGBA buffer.

    Doxygen:
    - @param pixels: uint8 array of shape (height, width, 4), RGBA order.
    - @param keep_original_colors: Disable the dark-to-white rule.
    - @return: New array of the same shape and dtype.
    - @throws ValueError: If the buffer is not (H, W, 4).
    """
    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError(f"Expected an RGBA buffer of shape (H, W, 4), got {pixels.shape}")

    out = pixels.copy()
    rgb = pixels[:, :, :3]
    background = (rgb > NEAR_WHITE_THRESHOLD).all(axis=2)
    out[background, 3] = 0

    if not keep_original_colors:
        dark = (rgb < NEAR_BLACK_THRESHOLD).all(axis=2) & ~background
        out[dark, :3] = 255
    return out
