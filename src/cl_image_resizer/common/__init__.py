"""Common module - errors, schemas, and base classes."""

from .compute_module import ComputeModule
from .errors import (
    DecodeFailure,
    EncodeFailure,
    ImageResizeError,
    MetadataCopyFailure,
    WriteFailure,
)
from .schema_job import BaseJobParams, JobRecordUpdate, JobStatus, TaskOutput
from .schemas import (
    EncodedImage,
    ImageDimensions,
    OutputFormat,
    ResizePlan,
    ResizerConfig,
    ResizeResult,
)

__all__ = [
    "BaseJobParams",
    "ComputeModule",
    "DecodeFailure",
    "EncodeFailure",
    "EncodedImage",
    "ImageDimensions",
    "ImageResizeError",
    "JobRecordUpdate",
    "JobStatus",
    "MetadataCopyFailure",
    "OutputFormat",
    "ResizePlan",
    "ResizeResult",
    "ResizerConfig",
    "TaskOutput",
    "WriteFailure",
]
