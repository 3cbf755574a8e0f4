"""Compiled-in settings: the logo job list and placeholder frame defaults."""

from __future__ import annotations

import os
from typing import Optional, Tuple

from sitegfx.image.model import Job

# Logo jobs run by `sitegfx` with no arguments
DEFAULT_JOBS: Tuple[Job, ...] = (
    # icon sits on a dark header: invert black to white
    Job("logo_icon.jpg", "logo_icon_transparent.png", keep_original_colors=False),
    # wordmark keeps its navy and blue, only the white background goes
    Job("logo_text.jpg", "logo_text_transparent.png", keep_original_colors=True),
)

# Placeholder frames (4 seconds at 30 fps)
FRAMES_DIR = "frames"
FRAME_COUNT = 120
FRAME_WIDTH = 1920
FRAME_HEIGHT = 1080
FRAME_JPEG_QUALITY = 80

BACKGROUND_COLOR = (2, 12, 27)      # #020C1B
GLOW_COLOR = (0, 240, 255)
FIGURE_COLOR = (0, 230, 118)        # #00E676
STEP_OUTLINE_COLOR = (0, 240, 255)  # #00F0FF
CAPTION_COLOR = (255, 255, 255)


def resolve_path(path: str, base_dir: Optional[str] = None) -> str:
    """Return `path` as an absolute path, relative ones joined onto `base_dir` (cwd by default)."""
    if os.path.isabs(path):
        return path
    base = base_dir if base_dir is not None else os.getcwd()
    return os.path.abspath(os.path.join(base, path))
