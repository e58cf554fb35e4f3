"""Exception classes for blurslice."""


class BlurError(Exception):
    """Base exception for blurslice errors."""

    pass


class BufferSizeError(BlurError, ValueError):
    """Raised when a pixel buffer holds fewer than width * height pixels.

    This is a caller bug, not a runtime condition worth recovering from.
    """

    def __init__(self, length: int, width: int, height: int):
        self.length = length
        self.width = width
        self.height = height
        super().__init__(
            f"pixel buffer of length {length} is too small for a "
            f"{width}x{height} image ({width * height} pixels required)"
        )


class SliceSizeError(BlurError, ValueError):
    """Raised when a byte buffer length is not a multiple of the channel count.

    :param expected: Largest valid length not above ``actual``
    :param actual: Length of the given buffer
    :param channels: Channel count the buffer was reshaped for
    """

    def __init__(self, expected: int, actual: int, channels: int):
        self.expected = expected
        self.actual = actual
        self.channels = channels
        super().__init__(
            f"incorrect u8 slice length {actual} for {channels} channel image, "
            f"expected {expected} or {expected + channels}"
        )

    def __eq__(self, other):
        if not isinstance(other, SliceSizeError):
            return NotImplemented
        return (self.expected, self.actual, self.channels) == (
            other.expected, other.actual, other.channels
        )

    def __hash__(self):
        return hash((self.expected, self.actual, self.channels))

    def __repr__(self) -> str:
        return (
            f"SliceSizeError(expected={self.expected}, actual={self.actual}, "
            f"channels={self.channels})"
        )
