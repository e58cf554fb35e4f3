"""Blur filters backed by the box-blur engine."""

from typing import ClassVar

import numpy as np
from pydantic import Field

from blurslice.fastblur import box_blur, gaussian_blur

from .base import BaseFilter
from .registry import register_filter


def _as_pixels(image: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Copy ``image`` and return the copy with its (n_pixels, C) view."""
    if not isinstance(image, np.ndarray):
        raise TypeError(f"Expected a numpy array, got {type(image).__name__}")
    if image.dtype != np.uint8:
        raise TypeError(f"Expected dtype uint8, got {image.dtype}")
    if image.ndim not in (2, 3):
        raise ValueError(f"Expected 2D or 3D array, got {image.ndim}D")

    result = np.array(image, dtype=np.uint8, order='C', copy=True)
    height, width = result.shape[:2]
    channels = result.shape[2] if result.ndim == 3 else 1
    return result, result.reshape(height * width, channels)


def blur_image(image: np.ndarray, sigma: float) -> np.ndarray:
    """Return a Gaussian-blurred copy of a (H, W) or (H, W, C) uint8 image."""
    result, pixels = _as_pixels(image)
    height, width = result.shape[:2]
    gaussian_blur(pixels, width, height, sigma)
    return result


@register_filter("fast_gaussian_blur")
class FastGaussianBlurFilter(BaseFilter):
    """Gaussian blur approximated by one box pass per channel."""

    name: ClassVar[str] = "Fast Gaussian Blur"

    sigma: float = Field(default=2.0, ge=0.0, le=100.0,
                         description="Gaussian standard deviation in pixels")

    def apply(self, image: np.ndarray) -> np.ndarray:
        return blur_image(image, self.sigma)


@register_filter("box_blur")
class BoxBlurFilter(BaseFilter):
    """Box (uniform) blur filter, a single horizontal and vertical pass."""

    name: ClassVar[str] = "Box Blur"

    radius: int = Field(default=2, ge=0, le=100,
                        description="Box radius in pixels, window is 2r+1")

    def apply(self, image: np.ndarray) -> np.ndarray:
        result, pixels = _as_pixels(image)
        height, width = result.shape[:2]
        if pixels.size:
            box_blur(pixels, pixels.copy(), width, height, self.radius, self.radius)
        return result
