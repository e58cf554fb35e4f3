# blurslice - Fast Gaussian Blur
"""
Gaussian blur approximated by repeated box blurs.

A true Gaussian of standard deviation ``sigma`` is approximated by a few
successive box blurs whose widths are chosen so the combined variance
matches (see http://blog.ivank.net/fastest-gaussian-blur.html). Each box
blur is separable and runs as a horizontal and a vertical sliding-window
pass, so the cost is independent of the blur radius.

Pixel buffers are 2-D ``uint8`` numpy arrays of shape ``(n_pixels, C)``,
row-major, where C is the channel count (1 luminance, 3 RGB, 4 RGBA, ...).
The number of box passes equals C.

Example::

    import numpy as np
    from blurslice import gaussian_blur

    pixels = np.array([[0xff, 0x00, 0xff], [0x00, 0xff, 0x00]], dtype=np.uint8)
    gaussian_blur(pixels, 2, 1, 2.0)
"""

from __future__ import annotations

import logging
import math
from enum import Enum

import numpy as np

from .exceptions import BufferSizeError
from .from_byte_slice import from_byte_slice

logger = logging.getLogger(__name__)


class Axis(Enum):
    """Direction of a single box-blur pass."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def create_box_gauss(sigma: float, n: int) -> tuple[int, ...]:
    """Compute ``n`` box diameters approximating a Gaussian of ``sigma``.

    The first ``m`` boxes use the smaller odd width ``wl``, the remaining
    ones ``wl + 2``. A non-positive sigma yields boxes of width 1, which
    leave the image untouched.

    :param sigma: Standard deviation of the Gaussian to approximate
    :param n: Number of box passes
    :returns: Tuple of ``n`` odd diameters, each >= 1
    """
    if not isinstance(n, (int, np.integer)) or n < 1:
        raise ValueError(f"number of passes must be a positive int, got {n!r}")
    n = int(n)
    sigma = float(sigma)
    # NaN compares false here as well
    if not sigma > 0.0:
        return (1,) * n

    w_ideal = math.sqrt(12.0 * sigma * sigma / n) + 1.0
    wl = max(int(math.floor(w_ideal)), 1)
    if wl % 2 == 0:
        wl -= 1
    wu = wl + 2

    m_ideal = (
        12.0 * sigma * sigma - n * wl * wl - 4.0 * n * wl - 3.0 * n
    ) / (-4.0 * wl - 4.0)
    m = min(max(_round_half_away(m_ideal), 0), n)

    return tuple(wl if i < m else wu for i in range(n))


plan_boxes = create_box_gauss


def _round_average(acc: np.ndarray, inv_window: float) -> np.ndarray:
    """Divide running sums by the window size and round to uint8.

    ``acc / (2r + 1)`` can never be exactly half way between two integers,
    so half-to-even rounding agrees with any other round-to-nearest mode.
    """
    return np.clip(np.rint(acc * inv_window), 0, 255).astype(np.uint8)


def _sweep_lines(source: np.ndarray, dest: np.ndarray, radius: int) -> None:
    """Moving average along axis 1 of ``(lines, length, C)`` views.

    All scan lines are advanced together, one output position per step,
    with clamp-to-edge at both ends of every line.
    """
    lines, length, _ = source.shape
    if lines == 0 or length == 0:
        return

    inv_window = 1.0 / (radius + radius + 1)
    first = source[:, 0, :].astype(np.int64)
    last = source[:, length - 1, :].astype(np.int64)

    acc = (radius + 1) * first
    acc += source[:, :min(radius, length), :].sum(axis=1, dtype=np.int64)
    if radius > length:
        acc += (radius - length) * last

    ti = 0
    li = 0
    ri = radius

    # Left edge of the window still before the line start
    for _ in range(min(length, radius + 1)):
        entering = source[:, ri, :] if ri < length else last
        ri += 1
        acc += entering
        acc -= first
        dest[:, ti, :] = _round_average(acc, inv_window)
        ti += 1

    if length > radius:
        for _ in range(radius + 1, length - radius):
            acc += source[:, ri, :]
            ri += 1
            acc -= source[:, li, :]
            li += 1
            dest[:, ti, :] = _round_average(acc, inv_window)
            ti += 1

        # Right edge of the window past the line end
        for _ in range(min(length - radius - 1, radius)):
            acc += last
            acc -= source[:, li, :]
            li += 1
            dest[:, ti, :] = _round_average(acc, inv_window)
            ti += 1


def _check_pixels(data: np.ndarray, writable: bool = True) -> None:
    if not isinstance(data, np.ndarray):
        raise TypeError(f"Expected a numpy array, got {type(data).__name__}")
    if data.ndim != 2 or data.shape[1] < 1:
        raise TypeError(f"Expected shape (n_pixels, channels), got {data.shape}")
    if data.dtype != np.uint8:
        raise TypeError(f"Expected dtype uint8, got {data.dtype}")
    if not data.flags.c_contiguous:
        raise TypeError("Pixel buffer must be C-contiguous")
    if writable and not data.flags.writeable:
        raise TypeError("Pixel buffer is read-only")


def _check_pass_buffers(
    source: np.ndarray, dest: np.ndarray, width: int, height: int
) -> None:
    _check_pixels(source, writable=False)
    _check_pixels(dest)
    if source.shape[1] != dest.shape[1]:
        raise ValueError(
            f"Channel count mismatch: source has {source.shape[1]}, "
            f"dest has {dest.shape[1]}"
        )
    if width < 0 or height < 0:
        raise ValueError(f"Image size must not be negative, got {width}x{height}")
    for buffer in (source, dest):
        if len(buffer) < width * height:
            raise BufferSizeError(len(buffer), width, height)


def _as_image(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    return buffer[:width * height].reshape(height, width, buffer.shape[1])


def box_blur_horz(
    source: np.ndarray,
    dest: np.ndarray,
    width: int,
    height: int,
    radius: int,
) -> None:
    """Blur every row of ``source`` into ``dest`` with a ``2r+1`` box.

    A radius of 0 copies ``source`` into ``dest`` unchanged.

    Raises:
        TypeError: If a buffer is not a 2-D C-contiguous uint8 array, or
            ``dest`` is read-only
        ValueError: If the channel counts differ
        BufferSizeError: If a buffer holds fewer than ``width * height``
            pixels
    """
    _check_pass_buffers(source, dest, width, height)
    if radius == 0:
        dest[:width * height] = source[:width * height]
        return
    _sweep_lines(
        _as_image(source, width, height),
        _as_image(dest, width, height),
        radius,
    )


def box_blur_vert(
    source: np.ndarray,
    dest: np.ndarray,
    width: int,
    height: int,
    radius: int,
) -> None:
    """Blur every column of ``source`` into ``dest`` with a ``2r+1`` box.

    Validation and radius-0 behaviour match :func:`box_blur_horz`.
    """
    _check_pass_buffers(source, dest, width, height)
    if radius == 0:
        dest[:width * height] = source[:width * height]
        return
    # Columns become lines of the transposed views
    _sweep_lines(
        _as_image(source, width, height).transpose(1, 0, 2),
        _as_image(dest, width, height).transpose(1, 0, 2),
        radius,
    )


def box_blur_pass(
    source: np.ndarray,
    dest: np.ndarray,
    width: int,
    height: int,
    radius: int,
    axis: Axis,
) -> None:
    """Run a single box-blur pass along ``axis``."""
    if axis is Axis.HORIZONTAL:
        box_blur_horz(source, dest, width, height, radius)
    elif axis is Axis.VERTICAL:
        box_blur_vert(source, dest, width, height, radius)
    else:
        raise ValueError(f"Unknown axis: {axis!r}")


def box_blur(
    frontbuf: np.ndarray,
    backbuf: np.ndarray,
    width: int,
    height: int,
    radius_horz: int,
    radius_vert: int,
) -> None:
    """Separable box blur of ``frontbuf`` using ``backbuf`` as scratch.

    The horizontal pass writes into ``backbuf`` and the vertical pass
    reads it back into ``frontbuf``, so the blurred image always ends up
    in ``frontbuf``.
    """
    box_blur_horz(frontbuf, backbuf, width, height, radius_horz)
    box_blur_vert(backbuf, frontbuf, width, height, radius_vert)


def gaussian_blur(data: np.ndarray, width: int, height: int, sigma: float) -> None:
    """Blur pixel data in place.

    Works for any channel count; the count is taken from ``data.shape[1]``.
    One back buffer the size of ``data`` is allocated per call. Pixels
    beyond ``width * height`` are left as they are.

    Args:
        data: ``uint8`` array of shape ``(n_pixels, channels)``, at least
            ``width * height`` pixels long, modified in place
        width: Image width in pixels
        height: Image height in pixels
        sigma: Standard deviation of the Gaussian; <= 0 leaves data unchanged

    Raises:
        BufferSizeError: If ``data`` holds fewer than ``width * height`` pixels
        TypeError: If ``data`` is not a writable 2-D uint8 array
    """
    _check_pixels(data)
    if width < 0 or height < 0:
        raise ValueError(f"Image size must not be negative, got {width}x{height}")
    if len(data) < width * height:
        raise BufferSizeError(len(data), width, height)

    channels = data.shape[1]
    boxes = create_box_gauss(sigma, channels)
    logger.debug(
        f"Blurring {width}x{height}x{channels} at sigma {sigma} with boxes {boxes}"
    )
    if width == 0 or height == 0:
        return

    backbuf = data.copy()
    for box_size in boxes:
        radius = (box_size - 1) // 2
        box_blur(data, backbuf, width, height, radius, radius)


def gaussian_blur_bytes(
    data,
    width: int,
    height: int,
    sigma: float,
    channels: int,
) -> None:
    """Blur packed pixel bytes in place.

    Equivalent to :func:`~blurslice.from_byte_slice.from_byte_slice`
    followed by :func:`gaussian_blur`. ``data`` must be writable, e.g. a
    ``bytearray`` or a 1-D ``uint8`` array.

    :raises SliceSizeError: If ``len(data)`` is not a multiple of ``channels``
    :raises BufferSizeError: If ``data`` is shorter than the image
    """
    pixels = from_byte_slice(data, channels)
    gaussian_blur(pixels, width, height, sigma)


__all__ = [
    'Axis',
    'create_box_gauss',
    'plan_boxes',
    'box_blur_horz',
    'box_blur_vert',
    'box_blur_pass',
    'box_blur',
    'gaussian_blur',
    'gaussian_blur_bytes',
]
