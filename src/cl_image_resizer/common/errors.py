"""Error taxonomy for image resizing."""

from pathlib import Path
from typing_extensions import override


class ImageResizeError(Exception):
    """Base class for resize failures tied to a file path."""

    def __init__(self, path: str | Path, message: str):
        self.path: str = str(path)
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message} ({self.path})"


class DecodeFailure(ImageResizeError):
    """Source image is missing, unreadable or corrupt."""


class EncodeFailure(ImageResizeError):
    """Codec rejected the pixel buffer or the encoding parameters."""


class WriteFailure(ImageResizeError):
    """Encoded bytes could not be written to the output path."""


class MetadataCopyFailure(ImageResizeError):
    """Metadata could not be transplanted onto the output file.

    Non-fatal: the resizer logs it and still returns the output path.
    """
