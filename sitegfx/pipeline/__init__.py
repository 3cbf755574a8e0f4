"""Batch orchestration for logo processing and placeholder frames."""

from .frames import format_progress_bar, generate_frames, print_progress_bar
from .logos import process_logo, run_batch

__all__ = [
    "format_progress_bar",
    "generate_frames",
    "print_progress_bar",
    "process_logo",
    "run_batch",
]
