"""Image I/O using Pillow."""

import io
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from utils.errors import DecodeError

ImageSource = Union[str, Path, bytes, BinaryIO]


def describe_source(source: ImageSource) -> str:
    """Short label for logs and errors."""
    if isinstance(source, (bytes, bytearray)):
        return f"<{len(source)} bytes>"
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "<stream>"))


_HIGH_DEPTH_MODES = ("I", "I;16", "I;16L", "I;16B", "I;16N", "F")


def to_8bit_gray(img: Image.Image) -> Image.Image:
    """Rescale 16-bit, 32-bit int and float grayscale to 8-bit "L"."""
    values = np.asarray(img, dtype=np.float64)
    if img.mode == "F" and values.size and values.max() <= 1.0:
        values = values * 255.0
    else:
        values = values / 257.0
    return Image.fromarray(np.clip(np.round(values), 0, 255).astype(np.uint8))


def load_image(source: ImageSource) -> np.ndarray:
    """Decode the first frame of an image as RGB uint8.

    Fully transparent pixels come out black, as when a transparent
    image is drawn onto an empty ARGB canvas.
    """
    fp = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
    try:
        with Image.open(fp) as img:
            img.seek(0)
            frame = to_8bit_gray(img) if img.mode in _HIGH_DEPTH_MODES else img
            rgba = np.asarray(frame.convert("RGBA"))
    except FileNotFoundError as e:
        raise DecodeError(describe_source(source), "no such file or directory") from e
    except (UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise DecodeError(describe_source(source), str(e)) from e
    except (OSError, ValueError, EOFError) as e:
        raise DecodeError(describe_source(source), f"{type(e).__name__}: {e}") from e

    rgb = rgba[:, :, :3].copy()
    rgb[rgba[:, :, 3] == 0] = 0
    return rgb


def save_image(image: np.ndarray, path: Union[str, Path], format: str = None, **kwargs) -> None:
    """Save an RGB (or gray) uint8 array."""
    Image.fromarray(image).save(path, format=format, **kwargs)
