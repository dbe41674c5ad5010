"""Writing rendered images to disk.

The renderer hands over a (height, width, 3) array of gamma-corrected
floats; this module quantizes it and encodes it as an 8-bit RGB PNG
with Pillow.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from spheretrace.renderer.tone_mapping import to_8bit

logger = logging.getLogger(__name__)


def save_png(image: npt.NDArray[np.float64], filepath: Union[str, Path]) -> Path:
    """Save a gamma-corrected float image as an 8-bit PNG.

    Args:
        image: Array of shape (height, width, 3), values nominally in [0, 1].
        filepath: Output path. Missing parent directories are created.

    Returns:
        The path written.

    Raises:
        ValueError: If ``image`` does not have shape (height, width, 3).
    """
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"expected an array of shape (height, width, 3), got {image.shape}")

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    pil_image = PILImage.fromarray(to_8bit(image))
    pil_image.save(path)
    logger.info("Wrote %dx%d image to %s", image.shape[1], image.shape[0], path)
    return path


def load_png(filepath: Union[str, Path]) -> npt.NDArray[np.uint8]:
    """Read a PNG back as a (height, width, 3) uint8 array."""
    with PILImage.open(filepath) as img:
        return np.asarray(img.convert("RGB"))
