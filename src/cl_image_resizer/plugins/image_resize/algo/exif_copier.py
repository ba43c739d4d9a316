"""Copy camera and orientation metadata between files using ExifTool.

ExifTool must be installed separately: https://exiftool.org/
"""

import subprocess
from pathlib import Path
from typing import Protocol, cast

from loguru import logger

from ....common.errors import MetadataCopyFailure

# Camera, exposure, GPS and orientation tags carried over to the scaled file
EXIF_TAGS: tuple[str, ...] = (
    "FNumber",
    "ExposureTime",
    "ISO",
    "GPSAltitude",
    "GPSAltitudeRef",
    "FocalLength",
    "GPSDateStamp",
    "WhiteBalance",
    "GPSProcessingMethod",
    "GPSTimeStamp",
    "DateTimeOriginal",
    "ModifyDate",
    "Flash",
    "GPSLatitude",
    "GPSLatitudeRef",
    "GPSLongitude",
    "GPSLongitudeRef",
    "Make",
    "Model",
    "Orientation",
)


class MetadataCopier(Protocol):
    """Protocol for the metadata-copy collaborator."""

    def copy_metadata(self, source_path: str | Path, dest_path: str | Path) -> None: ...


class NoOpMetadataCopier:
    """Copier used when metadata propagation is disabled."""

    def copy_metadata(self, source_path: str | Path, dest_path: str | Path) -> None:
        logger.debug(f"Metadata copy disabled; skipping {dest_path}")


class ExifToolCopier:
    """Transplant EXIF tags from an original image onto its re-encoded copy."""

    def __init__(
        self,
        tags: tuple[str, ...] = EXIF_TAGS,
        timeout: float = 30.0,
        executable: str = "exiftool",
    ) -> None:
        self.tags: tuple[str, ...] = tags
        self.timeout: float = timeout
        self.executable: str = executable

    def is_exiftool_available(self) -> bool:
        try:
            result = subprocess.run(
                [self.executable, "-ver"],
                check=True,
                capture_output=True,
                text=True,
                timeout=5,
            )
            logger.debug(f"ExifTool version {result.stdout.strip()} found")
            return True
        except (FileNotFoundError, subprocess.CalledProcessError, subprocess.TimeoutExpired):
            return False

    def build_command(self, source_path: str | Path, dest_path: str | Path) -> list[str]:
        tag_args = [f"-{tag}" for tag in self.tags]
        return [
            self.executable,
            "-q",
            "-m",
            "-overwrite_original",
            "-TagsFromFile",
            str(source_path),
            *tag_args,
            str(dest_path),
        ]

    def copy_metadata(self, source_path: str | Path, dest_path: str | Path) -> None:
        """
        Copy the configured tags from source_path onto dest_path in place.

        Raises:
            MetadataCopyFailure: If ExifTool is missing, fails or times out
        """
        dest = Path(dest_path)

        try:
            _ = subprocess.run(
                self.build_command(source_path, dest),
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise MetadataCopyFailure(dest, "ExifTool not found") from exc
        except subprocess.CalledProcessError as exc:
            stderr = cast(str, exc.stderr) if exc.stderr is not None else ""  # pyright: ignore[reportAny]
            raise MetadataCopyFailure(dest, f"ExifTool failed: {stderr.strip()}") from exc
        except subprocess.TimeoutExpired as exc:
            raise MetadataCopyFailure(dest, f"ExifTool timed out after {self.timeout}s") from exc

        logger.debug(f"Copied metadata {source_path} -> {dest}")
