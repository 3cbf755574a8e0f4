"""
Entry point and public facade for the site graphics scripts.

Packages:
- sitegfx.image: RGBA rasters, logo pixel rules, decode/encode
- sitegfx.render: placeholder frame drawing (PIL)
- sitegfx.pipeline: logo batch (`run_batch`) and frame sequence (`generate_frames`)
"""

from __future__ import annotations

from sitegfx.config import DEFAULT_JOBS
from sitegfx.image import (
    DecodeError,
    Job,
    JobResult,
    NotFoundError,
    RasterImage,
    WriteError,
    classify_pixel,
    decode,
    encode,
    remove_background,
    transform_pixel,
)
from sitegfx.pipeline import generate_frames, process_logo, run_batch
from sitegfx.render import render_frame

__all__ = [
    # data model / config
    "DEFAULT_JOBS",
    "Job",
    "JobResult",
    "RasterImage",
    # pixel rules
    "classify_pixel",
    "transform_pixel",
    "remove_background",
    # i/o
    "decode",
    "encode",
    "NotFoundError",
    "DecodeError",
    "WriteError",
    # batches
    "process_logo",
    "run_batch",
    "render_frame",
    "generate_frames",
]


def _cli() -> None:
    """CLI for logo processing and placeholder frames.

    No arguments: process the built-in logo jobs in the current directory.
    Always exits 0; per-logo failures are only reported.

    frames: render placeholder video frames
    --out-dir / -o: Output directory (default: frames)
    --count / -n: Number of frames (default: 120)
    --width, --height: Frame size (default: 1920x1080)
    --quality: JPEG quality 1..95 (default: 80)
    """
    import argparse

    from sitegfx import config

    parser = argparse.ArgumentParser(description="Prepare logo and placeholder video assets for the site.")
    sub = parser.add_subparsers(dest="command")
    frames = sub.add_parser("frames", help="Render placeholder video frames")
    frames.add_argument("--out-dir", "-o", type=str, default=config.FRAMES_DIR, help="Output directory (default: frames)")
    frames.add_argument("--count", "-n", type=int, default=config.FRAME_COUNT, help="Number of frames (default: 120)")
    frames.add_argument("--width", type=int, default=config.FRAME_WIDTH, help="Frame width in pixels (default: 1920)")
    frames.add_argument("--height", type=int, default=config.FRAME_HEIGHT, help="Frame height in pixels (default: 1080)")
    frames.add_argument("--quality", type=int, default=config.FRAME_JPEG_QUALITY, help="JPEG quality 1..95 (default: 80)")

    args = parser.parse_args()

    if args.command == "frames":
        try:
            generate_frames(
                out_dir=args.out_dir,
                num_frames=args.count,
                width=args.width,
                height=args.height,
                quality=args.quality,
            )
        except ValueError as e:
            print(str(e))
            raise SystemExit(2)
        return

    run_batch(DEFAULT_JOBS)


if __name__ == "__main__":
    _cli()
