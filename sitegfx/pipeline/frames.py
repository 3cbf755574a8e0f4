"""Placeholder frame sequence: render N frames and save them as JPEGs."""

from __future__ import annotations

import os
from typing import List

from sitegfx.config import FRAME_COUNT, FRAME_HEIGHT, FRAME_JPEG_QUALITY, FRAME_WIDTH, FRAMES_DIR
from sitegfx.render import frame_filename, render_frame


_BAR_DONE = "\x1b[32m"
_BAR_TODO = "\x1b[31m"
_BAR_RESET = "\x1b[0m"


def format_progress_bar(done: int, total: int, segments: int = 10) -> str:
    """Green/red block bar followed by a `[done/total]` frame counter."""
    total = max(1, total)
    done = max(0, min(done, total))
    segments = max(1, segments)
    filled = done * segments // total
    return (
        f"{_BAR_DONE}{'█' * filled}{_BAR_RESET}"
        f"{_BAR_TODO}{'█' * (segments - filled)}{_BAR_RESET} [{done}/{total}]"
    )


def print_progress_bar(done: int, total: int, segments: int = 10) -> None:
    """Redraw the frame progress bar in place on the current terminal line."""
    print(f"\r{format_progress_bar(done, total, segments)}", end="", flush=True)


def generate_frames(
    out_dir: str = FRAMES_DIR,
    num_frames: int = FRAME_COUNT,
    width: int = FRAME_WIDTH,
    height: int = FRAME_HEIGHT,
    quality: int = FRAME_JPEG_QUALITY,
) -> List[str]:
    """Render `num_frames` placeholder frames into `out_dir`.

    Doxygen:
    - @param out_dir: Output directory, created if missing.
    - @param num_frames: Number of frames to render (frame_001.jpg onwards).
    - @param width: Frame width in pixels.
    - @param height: Frame height in pixels.
    - @param quality: JPEG quality, 1..95.
    - @return: Paths of the written frames, in order.
    - @throws ValueError: On a non-positive count or size, or quality out of range.
    """
    if num_frames <= 0:
        raise ValueError(f"num_frames must be positive, got {num_frames}")
    if width <= 0 or height <= 0:
        raise ValueError(f"Frame size must be positive, got {width}x{height}")
    if not 1 <= quality <= 95:
        raise ValueError(f"JPEG quality must be in 1..95, got {quality}")

    os.makedirs(out_dir, exist_ok=True)
    print(f"Generating {num_frames} placeholder frames...")

    paths: List[str] = []
    for i in range(1, num_frames + 1):
        frame = render_frame(i, num_frames, width=width, height=height)
        path = os.path.join(out_dir, frame_filename(i))
        frame.save(path, format="JPEG", quality=quality)
        paths.append(path)
        print_progress_bar(i, num_frames)

    print(f"\n\nDone! Generated {num_frames} frames in {out_dir}")
    return paths
