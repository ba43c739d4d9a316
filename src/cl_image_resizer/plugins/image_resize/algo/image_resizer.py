"""Conditionally downscale and recompress an image, preserving its metadata."""

from pathlib import Path

from loguru import logger
from PIL import Image

from ....common.errors import MetadataCopyFailure, WriteFailure
from ....common.schemas import (
    EncodedImage,
    ImageDimensions,
    OutputFormat,
    ResizerConfig,
    ResizeResult,
)
from .exif_copier import ExifToolCopier, MetadataCopier, NoOpMetadataCopier
from .image_codec import ImageCodec, PillowCodec
from .scale_planner import clamp_quality, plan_scale, should_scale


class ImageResizer:
    """
    Resize executor.

    Owns no state besides its configuration and collaborators, so one
    instance may serve concurrent calls on different source paths.
    """

    def __init__(
        self,
        config: ResizerConfig,
        codec: ImageCodec | None = None,
        metadata_copier: MetadataCopier | None = None,
    ) -> None:
        self.config: ResizerConfig = config
        self.codec: ImageCodec = codec if codec is not None else PillowCodec(config.resample)

        if metadata_copier is not None:
            self.metadata_copier: MetadataCopier = metadata_copier
        elif config.copy_metadata:
            self.metadata_copier = ExifToolCopier(timeout=config.exiftool_timeout)
        else:
            self.metadata_copier = NoOpMetadataCopier()

    def output_path_for(self, source_path: str | Path) -> Path:
        """Return `<output_dir>/<marker><basename>` for a source path."""
        return self.config.output_dir / f"{self.config.marker}{Path(source_path).name}"

    def resize_if_needed(
        self,
        source_path: str | Path,
        max_width: float | None = None,
        max_height: float | None = None,
        quality: int | None = None,
    ) -> str:
        """
        Resize the image if any constraint is active and return the path to use.

        Returns the source path unchanged when nothing needs doing,
        otherwise the path of the newly written scaled image.
        """
        return self.resize_image_if_needed(
            source_path,
            max_width=max_width,
            max_height=max_height,
            quality=quality,
        ).output_path

    def resize_image_if_needed(
        self,
        source_path: str | Path,
        max_width: float | None = None,
        max_height: float | None = None,
        quality: int | None = None,
    ) -> ResizeResult:
        """
        Resize the image if needed and describe what was done.

        Args:
            source_path: Path to the source image (never modified)
            max_width: Optional width cap in pixels
            max_height: Optional height cap in pixels
            quality: JPEG quality in [0, 100]; any other value means unspecified

        Returns:
            ResizeResult with the output path and the applied plan

        Raises:
            ValueError: If a cap is not strictly positive
            DecodeFailure: If the source cannot be decoded
            EncodeFailure: If the scaled buffer cannot be encoded
            WriteFailure: If the output file cannot be written
        """
        if not should_scale(max_width, max_height, quality):
            logger.debug(f"No constraints for {source_path}; returning original")
            return ResizeResult(output_path=str(source_path), scaled=False)

        image = self.codec.decode(source_path)
        quality = clamp_quality(quality)

        plan = plan_scale(
            ImageDimensions(width=image.width, height=image.height),
            max_width=max_width,
            max_height=max_height,
        )
        scaled = self.codec.scale(image, plan.width, plan.height)

        encoded = self._encode(scaled, has_alpha=self.codec.has_alpha(image), quality=quality)

        output_path = self.output_path_for(source_path)
        self._write(output_path, encoded)

        try:
            self.metadata_copier.copy_metadata(source_path, output_path)
        except MetadataCopyFailure as exc:
            logger.warning(f"Metadata not copied to {output_path}: {exc}")

        logger.info(
            f"Scaled {source_path} {image.width}x{image.height} -> "
            + f"{plan.width}x{plan.height} {encoded.format.value} at {output_path}"
        )

        return ResizeResult(
            output_path=str(output_path),
            scaled=True,
            plan=plan,
            format=encoded.format,
        )

    def _encode(self, image: Image.Image, has_alpha: bool, quality: int) -> EncodedImage:
        if has_alpha:
            logger.debug(
                f"Image has an alpha channel; encoding PNG and ignoring quality {quality}"
            )
            data = self.codec.encode(image, OutputFormat.LOSSLESS, None)
            return EncodedImage(data=data, format=OutputFormat.LOSSLESS)

        data = self.codec.encode(image, OutputFormat.LOSSY, quality)
        return EncodedImage(data=data, format=OutputFormat.LOSSY, quality=quality)

    def _write(self, output_path: Path, encoded: EncodedImage) -> None:
        if not output_path.parent.is_dir():
            raise WriteFailure(output_path, "Output directory does not exist")

        try:
            _ = output_path.write_bytes(encoded.data)
        except OSError as exc:
            raise WriteFailure(output_path, f"Failed to write image: {exc}") from exc
