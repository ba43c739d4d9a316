"""Image resize parameters and output schemas."""

from pydantic import Field

from ...common.schema_job import BaseJobParams, TaskOutput
from ...common.schemas import OutputFormat


class ImageResizeParams(BaseJobParams):
    """Parameters for image resize task.

    Attributes:
        input_path: Absolute path to the source image
        max_width: Optional width cap in pixels
        max_height: Optional height cap in pixels
        quality: JPEG quality 0-100; anything else (or None) means unspecified
    """

    max_width: float | None = Field(default=None, gt=0, description="Maximum width in pixels")
    max_height: float | None = Field(default=None, gt=0, description="Maximum height in pixels")
    quality: int | None = Field(
        default=None,
        description="Compression quality (0-100). Out-of-range values disable quality scaling.",
    )


class ImageResizeOutput(TaskOutput):
    output_path: str = Field(description="Scaled image path, or the input path if unchanged")
    scaled: bool = Field(description="False if no constraint was active")
    width: int | None = Field(default=None, description="Output width in pixels")
    height: int | None = Field(default=None, description="Output height in pixels")
    format: OutputFormat | None = Field(default=None, description="Encoding of the output file")
