"""Test configuration and fixtures for cl_image_resizer.

This module provides:
- Pytest configuration (markers, dependency checks)
- Function-scoped fixtures (output dirs, synthetic images, log capture)
"""

import shutil
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw

from cl_image_resizer.common.schemas import ResizerConfig
from cl_image_resizer.plugins.image_resize.algo.image_resizer import ImageResizer

ImageFactory = Callable[..., Path]


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "requires_exiftool: requires ExifTool to be installed",
    )


def pytest_runtest_setup(item):
    """Check dependencies before running tests - FAIL if missing (not skip)."""
    if item.get_closest_marker("requires_exiftool") and not shutil.which("exiftool"):
        pytest.fail(
            "ExifTool not installed. "
            "Install: brew install exiftool (macOS) or "
            "apt-get install libimage-exiftool-perl (Linux)\n"
            "Or exclude with: pytest -m 'not requires_exiftool'",
            pytrace=False,
        )


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for scaled outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a synthetic image into tmp_path/input.

    Usage: make_image("photo.jpg", (800, 600), mode="RGB", format="JPEG", exif=None)
    """
    input_dir = tmp_path / "input"
    input_dir.mkdir()

    def _make(
        name: str,
        size: tuple[int, int],
        mode: str = "RGB",
        format: str = "JPEG",
        exif: Image.Exif | None = None,
    ) -> Path:
        path = input_dir / name
        color: tuple[int, ...] = (73, 109, 137, 128) if mode == "RGBA" else (73, 109, 137)
        img = Image.new("RGBA" if mode == "RGBA" else "RGB", size, color=color)

        draw = ImageDraw.Draw(img)
        width, height = size
        draw.ellipse([width // 4, height // 4, 3 * width // 4, 3 * height // 4], fill=(200, 100, 100))

        if mode not in ("RGB", "RGBA"):
            img = img.convert(mode)

        save_kwargs: dict[str, object] = {}
        if exif is not None:
            save_kwargs["exif"] = exif
        img.save(path, format, **save_kwargs)
        return path

    return _make


@pytest.fixture
def resizer(output_dir: Path) -> ImageResizer:
    """ImageResizer writing into output_dir with metadata copying disabled."""
    return ImageResizer(ResizerConfig(output_dir=output_dir, copy_metadata=False))


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
