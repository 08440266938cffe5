"""Image normalisation: upscale, smoothing, resize and grayscale."""

import logging

import cv2
import numpy as np

from utils.constants import SMOOTHING_KERNEL, WORKING_SIZE
from utils.errors import PreconditionError

logger = logging.getLogger(__name__)

_INTERPOLATION = {
    'nearest': cv2.INTER_NEAREST,
    'area': cv2.INTER_AREA,
    'bilinear': cv2.INTER_LINEAR,
}


def to_rgb(pixels: np.ndarray) -> np.ndarray:
    """Normalise a gray, RGB or RGBA grid to (H, W, 3) uint8."""
    pixels = np.asarray(pixels)
    if pixels.ndim not in (2, 3):
        raise PreconditionError(f"Expected a 2D or 3D pixel grid, got shape {pixels.shape}")
    h, w = pixels.shape[:2]
    if h == 0 or w == 0:
        raise PreconditionError(f"Pixel grid has zero dimension: {w}x{h}")

    if pixels.dtype != np.uint8:
        pixels = np.clip(pixels, 0, 255).astype(np.uint8)

    if pixels.ndim == 2:
        return cv2.cvtColor(np.ascontiguousarray(pixels), cv2.COLOR_GRAY2RGB)

    channels = pixels.shape[2]
    if channels == 1:
        return cv2.cvtColor(np.ascontiguousarray(pixels[:, :, 0]), cv2.COLOR_GRAY2RGB)
    if channels == 3:
        return np.ascontiguousarray(pixels)
    if channels == 4:
        return np.ascontiguousarray(pixels[:, :, :3])
    raise PreconditionError(f"Unsupported channel count: {channels}")


def upscale(pixels: np.ndarray, min_width: int, interpolation: str = 'nearest') -> np.ndarray:
    """Enlarge images narrower than min_width by 1 + min_width / width."""
    h, w = pixels.shape[:2]
    if min_width <= 0 or w >= min_width:
        return pixels

    # Single precision, as the scale factor has always been computed
    factor = np.float32(1) + np.float32(min_width) / np.float32(w)
    new_w = int(np.float32(w) * factor)
    new_h = int(np.float32(h) * factor)
    logger.debug("Upscaling %dx%d by %.3f to %dx%d", w, h, factor, new_w, new_h)
    return cv2.resize(pixels, (new_w, new_h), interpolation=_INTERPOLATION[interpolation])


def smooth(pixels: np.ndarray) -> np.ndarray:
    """3x3 Gaussian-like blur; the outer 1-pixel ring is copied through."""
    blurred = cv2.filter2D(pixels, -1, SMOOTHING_KERNEL, borderType=cv2.BORDER_REPLICATE)
    blurred[0, :] = pixels[0, :]
    blurred[-1, :] = pixels[-1, :]
    blurred[:, 0] = pixels[:, 0]
    blurred[:, -1] = pixels[:, -1]
    return blurred


def resize_to_working(
    pixels: np.ndarray,
    size: int = WORKING_SIZE,
    interpolation: str = 'nearest'
) -> np.ndarray:
    """Resample to size x size."""
    return cv2.resize(pixels, (size, size), interpolation=_INTERPOLATION[interpolation])


def grayscale(pixels: np.ndarray) -> np.ndarray:
    """Grayscale conversion kept as three equal channels (R = G = B)."""
    gray = cv2.cvtColor(pixels, cv2.COLOR_RGB2GRAY)
    return cv2.cvtColor(gray, cv2.COLOR_GRAY2RGB)


def blue_channel(gray_rgb: np.ndarray) -> np.ndarray:
    """Blue channel as float64 intensities indexed [x][y]."""
    return gray_rgb[:, :, 2].astype(np.float64).T


def preprocess(
    pixels: np.ndarray,
    size: int = WORKING_SIZE,
    min_width: int = 0,
    interpolation: str = 'nearest'
) -> np.ndarray:
    """Turn an arbitrary pixel grid into the size x size working grid."""
    rgb = to_rgb(pixels)

    # Small images get enlarged and blurred before the downscale
    if min_width > 0 and rgb.shape[1] < min_width:
        rgb = smooth(upscale(rgb, min_width, interpolation))

    reduced = resize_to_working(rgb, size, interpolation)
    return blue_channel(grayscale(reduced))
