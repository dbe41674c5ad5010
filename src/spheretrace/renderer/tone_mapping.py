# renderer/tone_mapping.py
import numpy as np


def gamma_correct(linear, gamma=2.0):
    """
    Encode linear radiance for display. The default gamma of 2 is a per-channel
    square root. Negative values are treated as black.
    """
    linear = np.maximum(np.asarray(linear, dtype=np.float64), 0.0)
    if gamma == 2.0:
        return np.sqrt(linear)
    return linear ** (1.0 / gamma)


def to_8bit(image):
    """
    Quantize display values to bytes. Channels are clamped to [0, 0.999]
    first so that 1.0 maps to 255 rather than overflowing.
    """
    clamped = np.clip(np.asarray(image, dtype=np.float64), 0.0, 0.999)
    return (clamped * 256).astype("uint8")


def luminance(image):
    """
    Per-pixel luminance using the Rec. 709 coefficients.
    """
    image = np.asarray(image, dtype=np.float64)
    return 0.2126 * image[..., 0] + 0.7152 * image[..., 1] + 0.0722 * image[..., 2]
