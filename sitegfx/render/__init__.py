"""Drawing helpers for generated site imagery."""

from .frames import frame_filename, render_frame

__all__ = [
    "frame_filename",
    "render_frame",
]
