"""Pixel formats and their channel counts."""

from enum import Enum

import numpy as np


class PixelFormat(Enum):
    """8-bit pixel format of an image."""
    GRAY = "L"      # uint8, 1 channel
    GRAYA = "LA"    # uint8, 2 channels
    RGB = "RGB"     # uint8, 3 channels
    RGBA = "RGBA"   # uint8, 4 channels

    @classmethod
    def from_pil_mode(cls, mode: str) -> "PixelFormat":
        """Map a PIL image mode to a pixel format."""
        for fmt in cls:
            if fmt.value == mode:
                return fmt
        raise ValueError(f"Unsupported PIL mode: {mode}")

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelFormat":
        """Detect pixel format from a (H, W) or (H, W, C) numpy array."""
        if arr.dtype != np.uint8:
            raise ValueError(f"Unsupported dtype: {arr.dtype}")
        if arr.ndim == 2:
            return cls.GRAY
        if arr.ndim != 3:
            raise ValueError(f"Expected 2D or 3D array, got {arr.ndim}D")

        channels = arr.shape[2]
        for fmt in cls:
            if fmt.channels == channels:
                return fmt
        raise ValueError(f"Unsupported channel count: {channels}")

    @property
    def channels(self) -> int:
        return len(self.value)

    @property
    def pil_mode(self) -> str:
        return self.value

    @property
    def has_alpha(self) -> bool:
        return self in (PixelFormat.GRAYA, PixelFormat.RGBA)
