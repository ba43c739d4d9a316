"""Image resize algorithms."""

from .exif_copier import ExifToolCopier, MetadataCopier, NoOpMetadataCopier
from .image_codec import ImageCodec, PillowCodec
from .image_resizer import ImageResizer
from .scale_planner import clamp_quality, plan_scale, should_scale

__all__ = [
    "ExifToolCopier",
    "ImageCodec",
    "ImageResizer",
    "MetadataCopier",
    "NoOpMetadataCopier",
    "PillowCodec",
    "clamp_quality",
    "plan_scale",
    "should_scale",
]
