from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

STATUS_SUCCEEDED = "succeeded"
STATUS_SKIPPED = "skipped"
STATUS_FAILED = "failed"


@dataclass
class RasterImage:
    """Decoded RGBA raster; `pixels` is a uint8 array of shape (height, width, 4)."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


@dataclass(frozen=True)
class Job:
    input_path: str
    output_path: str
    keep_original_colors: bool = False


@dataclass
class JobResult:
    job: Job
    status: str
    message: str = ""
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCEEDED
