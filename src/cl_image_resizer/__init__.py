"""cl_image_resizer - Conditional image downscaling with metadata preservation."""

from .common.compute_module import ComputeModule
from .common.errors import (
    DecodeFailure,
    EncodeFailure,
    ImageResizeError,
    MetadataCopyFailure,
    WriteFailure,
)
from .common.schemas import (
    ImageDimensions,
    OutputFormat,
    ResizePlan,
    ResizerConfig,
    ResizeResult,
)
from .plugins.image_resize import ImageResizeOutput, ImageResizeParams, ImageResizeTask
from .plugins.image_resize.algo import (
    ExifToolCopier,
    ImageResizer,
    NoOpMetadataCopier,
    PillowCodec,
    plan_scale,
)

__version__ = "0.1.0"

__all__ = [
    "ComputeModule",
    "DecodeFailure",
    "EncodeFailure",
    "ExifToolCopier",
    "ImageDimensions",
    "ImageResizeError",
    "ImageResizeOutput",
    "ImageResizeParams",
    "ImageResizeTask",
    "ImageResizer",
    "MetadataCopyFailure",
    "NoOpMetadataCopier",
    "OutputFormat",
    "PillowCodec",
    "ResizePlan",
    "ResizeResult",
    "ResizerConfig",
    "WriteFailure",
    "__version__",
    "plan_scale",
]
