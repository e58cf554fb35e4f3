"""
Reshape packed pixel bytes into per-pixel channel arrays.

Example::

    magenta = bytearray([0xff, 0x00, 0xff, 0xff, 0x00, 0xff])
    pixels = from_byte_slice(magenta, 3)
    assert pixels.shape == (2, 3)
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .exceptions import SliceSizeError

ByteBuffer = Union[bytes, bytearray, memoryview, np.ndarray]


def _flat_bytes(buffer: ByteBuffer) -> np.ndarray:
    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise TypeError(f"Expected dtype uint8, got {buffer.dtype}")
        if not buffer.flags.c_contiguous:
            raise TypeError("Byte array must be C-contiguous")
        return buffer.reshape(-1)
    if len(buffer) == 0:
        return np.empty(0, dtype=np.uint8)
    return np.frombuffer(buffer, dtype=np.uint8)


def from_byte_slice(buffer: ByteBuffer, channels: int) -> np.ndarray:
    """View a flat byte buffer as an array of ``channels``-sized pixels.

    No data is copied: the returned ``(n_pixels, channels)`` array shares
    memory with ``buffer`` and is writable whenever ``buffer`` is (a
    ``bytearray`` is, ``bytes`` is not).

    :param buffer: Packed pixel data
    :param channels: Channel count per pixel
    :returns: uint8 array of shape ``(len(buffer) // channels, channels)``
    :raises SliceSizeError: If the length is not a multiple of ``channels``
    """
    if channels < 1:
        raise ValueError(f"channels must be >= 1, got {channels}")
    flat = _flat_bytes(buffer)
    actual = flat.size
    expected = (actual // channels) * channels
    if actual != expected:
        raise SliceSizeError(expected=expected, actual=actual, channels=channels)
    return flat.reshape(-1, channels)


def to_byte_slice(pixels: np.ndarray) -> bytes:
    """Flatten a pixel array back into packed bytes."""
    return np.ascontiguousarray(pixels, dtype=np.uint8).tobytes()


__all__ = ['ByteBuffer', 'from_byte_slice', 'to_byte_slice', 'SliceSizeError']
