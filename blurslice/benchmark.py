# blurslice - Benchmark Utilities
"""
Benchmark utilities for measuring blur performance.

Each configured sigma is timed over a number of iterations; every
iteration blurs a fresh copy of the source so all runs do the same work.
Results are serializable dataclasses with ASCII table output.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field, asdict
from typing import Any

import numpy as np

from .config import settings
from .fastblur import create_box_gauss
from .filters.blur import blur_image

logger = logging.getLogger(__name__)


@dataclass
class SigmaResult:
    """Timing result for a single sigma."""
    sigma: float
    boxes: list[int]
    iterations: int
    total_ms: float
    avg_ms: float
    min_ms: float
    megapixels_per_s: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class BenchmarkResult:
    """Complete benchmark result - serializable."""
    name: str
    source_size: tuple[int, int]
    channels: int
    source_megapixels: float
    results: list[SigmaResult] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        d = asdict(self)
        d['results'] = [r.to_dict() for r in self.results]
        return d

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> 'BenchmarkResult':
        """Create from dictionary."""
        d = dict(d)
        results = [SigmaResult(**r) for r in d.pop('results', [])]
        d['source_size'] = tuple(d['source_size'])
        return cls(**d, results=results)

    def ascii_table(self) -> str:
        """Generate ASCII table representation."""
        lines = []
        lines.append("=" * 60)
        lines.append(f"BENCHMARK: {self.name}")
        lines.append("=" * 60)
        lines.append("")
        lines.append(
            f"Source: {self.source_size[0]}x{self.source_size[1]}x{self.channels} "
            f"({self.source_megapixels:.2f} MP)"
        )
        lines.append("")

        lines.append("-" * 60)
        lines.append(f"{'Sigma':>8} {'Boxes':<14} {'Avg':>10} {'Min':>10} {'MP/s':>10}")
        lines.append("-" * 60)
        for r in self.results:
            boxes = ",".join(str(b) for b in r.boxes)
            lines.append(
                f"{r.sigma:>8.1f} {boxes:<14} {r.avg_ms:>8.1f}ms {r.min_ms:>8.1f}ms "
                f"{r.megapixels_per_s:>10.1f}"
            )
        lines.append("=" * 60)

        return "\n".join(lines)

    def print(self) -> None:
        """Print ASCII table to terminal."""
        print(self.ascii_table())


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""
    iterations: int = field(default_factory=lambda: settings.BENCH_ITERATIONS)
    warmup: int = field(default_factory=lambda: settings.BENCH_WARMUP)
    sigmas: list[float] = field(default_factory=lambda: list(settings.BENCH_SIGMAS))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class Benchmark:
    """Benchmark runner for the fast Gaussian blur.

    Example::

        from blurslice.benchmark import Benchmark, BenchmarkConfig

        source = Benchmark.synthetic_source(640, 480)
        result = Benchmark.run(source, BenchmarkConfig(sigmas=[1.5]))
        result.print()
    """

    @staticmethod
    def synthetic_source(
        width: int = 640,
        height: int = 480,
        channels: int = 3,
        seed: int = 0,
    ) -> np.ndarray:
        """Create a reproducible noise image of shape (height, width, channels)."""
        rng = np.random.default_rng(seed)
        return rng.integers(0, 256, (height, width, channels), dtype=np.uint8)

    @staticmethod
    def run(
        source: np.ndarray,
        config: BenchmarkConfig | None = None,
        name: str = "gaussian_blur",
    ) -> BenchmarkResult:
        """Benchmark blurring ``source`` at every configured sigma.

        :param source: uint8 image, shape (H, W) or (H, W, C)
        :param config: Benchmark configuration, defaults from settings
        :param name: Name shown in the result table
        :returns: BenchmarkResult with timing data
        """
        if config is None:
            config = BenchmarkConfig()
        if config.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {config.iterations}")

        height, width = source.shape[:2]
        channels = source.shape[2] if source.ndim == 3 else 1
        megapixels = width * height / 1_000_000

        result = BenchmarkResult(
            name=name,
            source_size=(width, height),
            channels=channels,
            source_megapixels=megapixels,
        )

        for sigma in config.sigmas:
            for _ in range(config.warmup):
                blur_image(source, sigma)

            timings = []
            for _ in range(config.iterations):
                start = time.perf_counter()
                blur_image(source, sigma)
                timings.append(time.perf_counter() - start)

            total = sum(timings)
            avg = total / len(timings)
            result.results.append(SigmaResult(
                sigma=float(sigma),
                boxes=list(create_box_gauss(sigma, channels)),
                iterations=config.iterations,
                total_ms=total * 1000,
                avg_ms=avg * 1000,
                min_ms=min(timings) * 1000,
                megapixels_per_s=megapixels / avg if avg > 0 else 0.0,
            ))
            logger.info(f"sigma {sigma}: {avg * 1000:.1f}ms avg over {config.iterations} runs")

        return result


__all__ = ['SigmaResult', 'BenchmarkResult', 'BenchmarkConfig', 'Benchmark']
