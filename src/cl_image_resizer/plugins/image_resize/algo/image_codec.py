"""Pillow-backed codec: decode, inspect, scale and encode single-frame rasters."""

from io import BytesIO
from pathlib import Path
from typing import Protocol

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ....common.errors import DecodeFailure, EncodeFailure
from ....common.schemas import OutputFormat

# Modes JPEG can store directly; everything else is converted to RGB
JPEG_MODES = ("RGB", "L", "CMYK")


class ImageCodec(Protocol):
    """Protocol for the codec collaborator used by ImageResizer."""

    def decode(self, path: str | Path) -> Image.Image: ...

    def has_alpha(self, image: Image.Image) -> bool: ...

    def scale(self, image: Image.Image, width: int, height: int) -> Image.Image: ...

    def encode(self, image: Image.Image, format: OutputFormat, quality: int | None) -> bytes: ...


class PillowCodec:
    """ImageCodec implementation over Pillow."""

    def __init__(self, resample: Image.Resampling = Image.Resampling.NEAREST) -> None:
        self.resample: Image.Resampling = resample

    def decode(self, path: str | Path) -> Image.Image:
        """
        Decode the first frame of an image file fully into memory.

        Raises:
            DecodeFailure: If the file is missing, unreadable or corrupt
        """
        path = Path(path)
        try:
            with Image.open(path) as img:
                img.load()
                decoded = img.copy()
        except FileNotFoundError as exc:
            raise DecodeFailure(path, "Input file not found") from exc
        except UnidentifiedImageError as exc:
            raise DecodeFailure(path, "Not a recognised image format") from exc
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise DecodeFailure(path, f"Failed to decode image: {exc}") from exc

        logger.debug(f"Decoded {path} ({decoded.mode} {decoded.width}x{decoded.height})")
        return decoded

    def has_alpha(self, image: Image.Image) -> bool:
        return image.has_transparency_data

    def scale(self, image: Image.Image, width: int, height: int) -> Image.Image:
        if image.size == (width, height):
            return image.copy()
        return image.resize((width, height), self.resample)

    def encode(self, image: Image.Image, format: OutputFormat, quality: int | None) -> bytes:
        """
        Encode a pixel buffer to bytes.

        Lossless output is PNG and ignores quality. Lossy output is JPEG at
        the given quality (100 if None).

        Raises:
            EncodeFailure: If Pillow rejects the buffer or parameters
        """
        save_kwargs: dict[str, object] = {}

        if format == OutputFormat.LOSSLESS:
            save_kwargs["optimize"] = True
        else:
            # JPEG does not support alpha or palette modes
            if image.mode not in JPEG_MODES:
                image = image.convert("RGB")
            save_kwargs["quality"] = quality if quality is not None else 100

        buffer = BytesIO()
        try:
            image.save(buffer, format=format.value, **save_kwargs)
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeFailure(
                "<memory>", f"Failed to encode {image.mode} image as {format.value}: {exc}"
            ) from exc

        return buffer.getvalue()
