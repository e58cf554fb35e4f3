"""
blurslice - Fast approximate Gaussian blur for 8-bit pixel buffers
"""

from .exceptions import BlurError, BufferSizeError, SliceSizeError
from .fastblur import (
    Axis,
    create_box_gauss,
    plan_boxes,
    box_blur_horz,
    box_blur_vert,
    box_blur_pass,
    box_blur,
    gaussian_blur,
    gaussian_blur_bytes,
)
from .from_byte_slice import from_byte_slice, to_byte_slice
from .pixel_format import PixelFormat

__all__ = [
    # Blur engine
    "Axis",
    "create_box_gauss",
    "plan_boxes",
    "box_blur_horz",
    "box_blur_vert",
    "box_blur_pass",
    "box_blur",
    "gaussian_blur",
    "gaussian_blur_bytes",
    # Byte buffers
    "from_byte_slice",
    "to_byte_slice",
    # Pixel formats
    "PixelFormat",
    # Errors
    "BlurError",
    "BufferSizeError",
    "SliceSizeError",
]

__version__ = "0.1.0"
