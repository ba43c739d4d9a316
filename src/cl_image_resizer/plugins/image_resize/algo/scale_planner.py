"""Pure scale planning: decide whether to scale and compute target dimensions."""

from ....common.schemas import ImageDimensions, ResizePlan

MIN_QUALITY = 0
MAX_QUALITY = 100


def should_scale(
    max_width: float | None,
    max_height: float | None,
    quality: int | None,
) -> bool:
    """Return True if any constraint is active.

    A quality outside [0, 100] (or None) means "unspecified" and does not
    by itself request scaling.
    """
    return (
        max_width is not None
        or max_height is not None
        or (quality is not None and MIN_QUALITY <= quality <= MAX_QUALITY)
    )


def clamp_quality(quality: int | None) -> int:
    """Map an unspecified or out-of-range quality to best effort (100)."""
    if quality is None or quality < MIN_QUALITY or quality > MAX_QUALITY:
        return MAX_QUALITY
    return quality


def plan_scale(
    original: ImageDimensions,
    max_width: float | None = None,
    max_height: float | None = None,
) -> ResizePlan:
    """
    Compute downscaled dimensions that fit the given caps.

    Each axis is first capped independently, then the less constrained
    axis is recomputed from the original aspect ratio. Never upscales.

    Args:
        original: Dimensions of the decoded source image
        max_width: Optional width cap
        max_height: Optional height cap

    Returns:
        ResizePlan with truncated integer dimensions

    Raises:
        ValueError: If a cap is not strictly positive
    """
    if max_width is not None and max_width <= 0:
        raise ValueError(f"max_width must be positive, got {max_width}")
    if max_height is not None and max_height <= 0:
        raise ValueError(f"max_height must be positive, got {max_height}")

    original_width = original.width
    original_height = original.height

    has_max_width = max_width is not None
    has_max_height = max_height is not None

    width = min(original_width, max_width) if max_width is not None else original_width
    height = min(original_height, max_height) if max_height is not None else original_height

    should_downscale_width = max_width is not None and max_width < original_width
    should_downscale_height = max_height is not None and max_height < original_height

    if should_downscale_width or should_downscale_height:
        downscaled_width = (height / original_height) * original_width
        downscaled_height = (width / original_width) * original_height

        if width < height:
            if not has_max_width:
                width = downscaled_width
            else:
                height = downscaled_height
        elif height < width:
            if not has_max_height:
                height = downscaled_height
            else:
                width = downscaled_width
        else:
            # Equal caps: follow the original orientation; squares stay as seeded
            if original_width < original_height:
                width = downscaled_width
            elif original_height < original_width:
                height = downscaled_height

        # The tie-break can let the recomputed axis overshoot its own cap
        if max_width is not None and width > max_width:
            width = max_width
            height = (max_width / original_width) * original_height
        if max_height is not None and height > max_height:
            height = max_height
            width = (max_height / original_height) * original_width

    # Truncate, never round; an extreme ratio may truncate to 0
    return ResizePlan(width=max(int(width), 1), height=max(int(height), 1))
