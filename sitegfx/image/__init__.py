"""Image-level utilities: RGBA rasters, logo pixel rules and PNG/JPEG I/O."""

from .errors import DecodeError, ImageIOError, NotFoundError, WriteError
from .io import decode, encode
from .model import Job, JobResult, RasterImage
from .pixels import classify_pixel, remove_background, transform_pixel

__all__ = [
    "DecodeError",
    "ImageIOError",
    "NotFoundError",
    "WriteError",
    "decode",
    "encode",
    "Job",
    "JobResult",
    "RasterImage",
    "classify_pixel",
    "remove_background",
    "transform_pixel",
]
