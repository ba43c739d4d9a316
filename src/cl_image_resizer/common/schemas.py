"""Value objects shared by the resize planner, codec and executor."""

from enum import StrEnum
from pathlib import Path
from typing import ClassVar

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field


class ImageDimensions(BaseModel):
    """Width and height of a raster, kept as reals for ratio arithmetic."""

    width: float = Field(gt=0)
    height: float = Field(gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ResizePlan(BaseModel):
    """Target pixel dimensions computed by the scale planner."""

    width: int = Field(ge=1)
    height: int = Field(ge=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class OutputFormat(StrEnum):
    LOSSY = "JPEG"
    LOSSLESS = "PNG"


class EncodedImage(BaseModel):
    data: bytes
    format: OutputFormat
    quality: int | None = Field(default=None, ge=0, le=100)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ResizeResult(BaseModel):
    """Outcome of a single resize invocation.

    `scaled` is False when no constraint was active and `output_path`
    is the untouched source path.
    """

    output_path: str
    scaled: bool
    plan: ResizePlan | None = None
    format: OutputFormat | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ResizerConfig(BaseModel):
    """Per-instance resizer configuration.

    Attributes:
        output_dir: Existing directory that receives scaled files
        marker: Prefix prepended to the source basename
        resample: Pillow resampling filter used for scaling
        copy_metadata: Copy EXIF camera/orientation tags onto the output
        exiftool_timeout: Seconds before an ExifTool call is abandoned
    """

    output_dir: Path
    marker: str = Field(default="scaled_", min_length=1)
    resample: Image.Resampling = Image.Resampling.NEAREST
    copy_metadata: bool = True
    exiftool_timeout: float = Field(default=30.0, gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)
