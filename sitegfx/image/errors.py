from __future__ import annotations


class ImageIOError(Exception):
    """Base class for raster read/write failures; `path` names the file involved."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(reason)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


class NotFoundError(ImageIOError, FileNotFoundError):
    pass


class DecodeError(ImageIOError, RuntimeError):
    pass


class WriteError(ImageIOError, OSError):
    pass
