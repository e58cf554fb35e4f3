"""
Pytest fixtures and reference helpers for blurslice tests
"""

import numpy as np
import pytest


def _box_line(line: np.ndarray, radius: int) -> np.ndarray:
    """Clamp-to-edge moving average of a (length, C) line, exact rounding."""
    length = line.shape[0]
    window = 2 * radius + 1
    out = np.empty_like(line)
    values = line.astype(np.int64)
    for t in range(length):
        idx = np.clip(np.arange(t - radius, t + radius + 1), 0, length - 1)
        total = values[idx].sum(axis=0)
        # Exact round-to-nearest of total / window, no ties possible
        out[t] = (2 * total + window) // (2 * window)
    return out


def _box_blur(image: np.ndarray, radius: int) -> np.ndarray:
    """Horizontal then vertical reference box blur of a (H, W, C) image."""
    if radius == 0:
        return image.copy()
    horz = np.stack([_box_line(row, radius) for row in image])
    vert = np.stack(
        [_box_line(horz[:, x], radius) for x in range(horz.shape[1])],
        axis=1,
    )
    return vert


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def noise_rgb(rng) -> np.ndarray:
    """A 13x9 RGB noise image."""
    return rng.integers(0, 256, (9, 13, 3), dtype=np.uint8)


@pytest.fixture
def reference_box_line():
    """Brute-force clamp-to-edge moving average of one (length, C) line."""
    return _box_line


@pytest.fixture
def reference_box_blur():
    """Brute-force horizontal then vertical box blur of a (H, W, C) image."""
    return _box_blur
