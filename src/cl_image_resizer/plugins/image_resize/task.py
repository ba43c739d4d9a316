"""Image resize task implementation."""

import asyncio
import logging
from typing import Callable

from typing_extensions import override

from ...common.compute_module import ComputeModule
from ...common.schemas import ResizerConfig
from .algo.image_resizer import ImageResizer
from .schema import ImageResizeOutput, ImageResizeParams

logger = logging.getLogger(__name__)


class ImageResizeTask(ComputeModule[ImageResizeParams, ImageResizeOutput]):
    """Compute module for conditionally downscaling images."""

    schema: type[ImageResizeParams] = ImageResizeParams

    def __init__(self, config: ResizerConfig) -> None:
        self.resizer: ImageResizer = ImageResizer(config)

    @property
    @override
    def task_type(self) -> str:
        return "image_resize"

    @override
    async def run(
        self,
        params: ImageResizeParams,
        progress_callback: Callable[[int], None] | None = None,
    ) -> ImageResizeOutput:
        # Decoding holds the whole raster in memory; keep it off the event loop
        result = await asyncio.to_thread(
            self.resizer.resize_image_if_needed,
            params.input_path,
            max_width=params.max_width,
            max_height=params.max_height,
            quality=params.quality,
        )

        if progress_callback:
            progress_callback(100)

        logger.debug(f"image_resize finished for {params.input_path}: {result.output_path}")

        return ImageResizeOutput(
            output_path=result.output_path,
            scaled=result.scaled,
            width=result.plan.width if result.plan is not None else None,
            height=result.plan.height if result.plan is not None else None,
            format=result.format,
        )
