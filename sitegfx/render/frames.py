"""Placeholder animation frames for the hero video.

A stand-in for the final 3D render: a figure climbing glowing glass steps
on the site's navy background, with a frame counter in the corner. Drawn
with PIL; the radial glow is computed with numpy.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from sitegfx.config import (
    BACKGROUND_COLOR,
    CAPTION_COLOR,
    FIGURE_COLOR,
    FRAME_HEIGHT,
    FRAME_WIDTH,
    GLOW_COLOR,
    STEP_OUTLINE_COLOR,
)

CAPTION_FONTS = [
    "DejaVuSans.ttf",
    "arial.ttf",
    "segoeui.ttf",
    "Helvetica.ttc",
]
CAPTION_SIZE = 48
STEP_COUNT = 5


def frame_filename(index: int) -> str:
    return f"frame_{index:03d}.jpg"


def _load_caption_font(size: int) -> ImageFont.ImageFont:
    for name in CAPTION_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def _glow_layer(width: int, height: int, intensity: float) -> np.ndarray:
    """RGB background with a centred cyan glow fading out between r=100 and r=width/2."""
    inner = 100.0
    outer = max(inner + 1.0, width / 2.0)
    yy, xx = np.mgrid[0:height, 0:width].astype(np.float32)
    dist = np.hypot(xx - width / 2.0, yy - height / 2.0)
    t = np.clip((dist - inner) / (outer - inner), 0.0, 1.0)
    alpha = (0.1 + intensity * 0.1) * (1.0 - t)

    bg = np.array(BACKGROUND_COLOR, dtype=np.float32)
    glow = np.array(GLOW_COLOR, dtype=np.float32)
    out = bg * (1.0 - alpha[..., None]) + glow * alpha[..., None]
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


def _step_polygon(base_x: float, base_y: float) -> List[Tuple[float, float]]:
    return [
        (base_x, base_y),
        (base_x + 250, base_y),
        (base_x + 300, base_y + 30),
        (base_x + 50, base_y + 30),
    ]


def draw_glass_step(canvas: Image.Image, base_x: float, base_y: float, fill_alpha: int, line_width: int = 10) -> None:
    """Composite one translucent step onto an RGBA `canvas`, outline centred on the edges."""
    points = _step_polygon(base_x, base_y)
    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    draw.polygon(points, fill=GLOW_COLOR + (fill_alpha,))
    # polygon(width=...) strokes inside the shape; line() straddles the path
    draw.line(points + points[:1], fill=STEP_OUTLINE_COLOR + (255,), width=line_width, joint="curve")
    canvas.alpha_composite(layer)


def render_frame(index: int, total: int, width: int = FRAME_WIDTH, height: int = FRAME_HEIGHT) -> Image.Image:
    """Draw frame `index` (1-based) of `total`.

    Doxygen:
    - @param index: Frame number, 1..total.
    - @param total: Number of frames in the sequence.
    - @param width: Frame width in pixels.
    - @param height: Frame height in pixels.
    - @return: RGB PIL image.
    """
    progress = index / total

    glow_intensity = abs(math.sin(progress * math.pi * 4))
    canvas = Image.fromarray(_glow_layer(width, height, glow_intensity)).convert("RGBA")

    # Figure walks from bottom-left to top-right, bobbing as it goes
    man_x = 300 + progress * (width - 600)
    man_y = 800 - progress * 400
    bob = math.sin(progress * math.pi * 12) * 20
    draw = ImageDraw.Draw(canvas)
    draw.rounded_rectangle(
        (man_x - 50, man_y - 150 + bob, man_x + 50, man_y + 150 + bob),
        radius=20,
        fill=FIGURE_COLOR,
    )

    step_offset = ((progress * 10) % 1) * 100
    for j in range(STEP_COUNT):
        base_x = man_x - 300 + j * 150 - step_offset
        base_y = man_y + 150 - j * 100 + step_offset
        fill_alpha = int(round(255 * (0.1 + j * 0.05)))
        draw_glass_step(canvas, base_x, base_y, fill_alpha)

    draw = ImageDraw.Draw(canvas)
    draw.text(
        (50, 100),
        f"Frame {index}/{total}",
        font=_load_caption_font(CAPTION_SIZE),
        fill=CAPTION_COLOR,
        anchor="ls",
    )
    return canvas.convert("RGB")
