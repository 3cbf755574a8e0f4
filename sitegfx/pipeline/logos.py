"""Logo batch: decode → strip background → encode PNG, one job at a time.

A failing job is reported and the batch moves on to the next one; the
batch itself always runs to completion.
"""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional

from sitegfx.config import DEFAULT_JOBS, resolve_path
from sitegfx.image import (
    DecodeError,
    Job,
    JobResult,
    NotFoundError,
    RasterImage,
    WriteError,
    decode,
    encode,
    remove_background,
)
from sitegfx.image.model import STATUS_FAILED, STATUS_SKIPPED, STATUS_SUCCEEDED


def process_logo(job: Job, base_dir: Optional[str] = None) -> JobResult:
    """Run a single logo job and report its outcome.

    Doxygen:
    - @param job: Input/output paths and colour mode.
    - @param base_dir: Directory relative job paths are resolved against (cwd if None).
    - @return: `JobResult` with status succeeded, skipped (input missing) or failed.
    """
    input_path = resolve_path(job.input_path, base_dir)
    output_path = resolve_path(job.output_path, base_dir)

    try:
        image = decode(input_path)
    except NotFoundError:
        print(f"[SKIPPED] '{job.input_path}' not found.", file=sys.stderr)
        return JobResult(job=job, status=STATUS_SKIPPED, message=f"'{job.input_path}' not found.")
    except DecodeError as e:
        print(f"[ERROR] {job.input_path}: {e}", file=sys.stderr)
        return JobResult(job=job, status=STATUS_FAILED, message=str(e))

    result = RasterImage(pixels=remove_background(image.pixels, job.keep_original_colors))

    try:
        encode(result, output_path)
    except WriteError as e:
        print(f"[ERROR] {job.input_path}: {e}", file=sys.stderr)
        return JobResult(job=job, status=STATUS_FAILED, message=str(e))

    print(f"[OK] {job.output_path}")
    return JobResult(
        job=job,
        status=STATUS_SUCCEEDED,
        message=output_path,
        width=result.width,
        height=result.height,
    )


def run_batch(jobs: Iterable[Job] = DEFAULT_JOBS, base_dir: Optional[str] = None) -> List[JobResult]:
    """Process every job in order and print a completion line at the end."""
    print("Processing logos...\n")
    results = [process_logo(job, base_dir=base_dir) for job in jobs]
    done = sum(1 for r in results if r.ok)
    print(f"\nDone! {done}/{len(results)} logos written. Refresh the browser.")
    return results
