"""Writing rendered images to disk."""

from pathlib import Path
from typing import Union

import structlog

logger = structlog.get_logger()


def write_image(path: Union[str, Path], data: bytes) -> Path:
    """
    Write serialized image bytes to `path`, replacing any existing file.

    Args:
        path: Destination file
        data: Encoded image, e.g. from `Canvas.to_ppm()`

    Returns:
        The destination as a Path

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(path)
    path.write_bytes(data)
    logger.info("Image written", path=str(path), size_bytes=len(data))
    return path
