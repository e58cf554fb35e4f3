"""Tests for Benchmark utilities."""

import json

import numpy as np
import pytest

from blurslice.benchmark import (
    Benchmark,
    BenchmarkConfig,
    BenchmarkResult,
    SigmaResult,
)
from blurslice.config import settings


@pytest.fixture
def test_image():
    """Create a small test image."""
    return Benchmark.synthetic_source(24, 16, channels=3, seed=7)


class TestBenchmarkConfig:
    """Tests for BenchmarkConfig."""

    def test_default_config(self):
        """BenchmarkConfig should take its defaults from settings."""
        config = BenchmarkConfig()
        assert config.iterations == settings.BENCH_ITERATIONS
        assert config.warmup == settings.BENCH_WARMUP
        assert config.sigmas == list(settings.BENCH_SIGMAS)

    def test_custom_config(self):
        config = BenchmarkConfig(iterations=3, warmup=0, sigmas=[1.0])
        assert config.to_dict() == {'iterations': 3, 'warmup': 0, 'sigmas': [1.0]}


class TestSyntheticSource:
    """Tests for the synthetic benchmark image."""

    def test_shape_and_dtype(self):
        source = Benchmark.synthetic_source(10, 5, channels=4)
        assert source.shape == (5, 10, 4)
        assert source.dtype == np.uint8

    def test_reproducible(self):
        a = Benchmark.synthetic_source(8, 8, seed=3)
        b = Benchmark.synthetic_source(8, 8, seed=3)
        np.testing.assert_array_equal(a, b)


class TestBenchmarkRun:
    """Tests for Benchmark.run."""

    def test_run(self, test_image):
        config = BenchmarkConfig(iterations=2, warmup=0, sigmas=[1.5, 20.0])
        result = Benchmark.run(test_image, config, name="small")

        assert result.name == "small"
        assert result.source_size == (24, 16)
        assert result.channels == 3
        assert len(result.results) == 2
        first = result.results[0]
        assert first.sigma == 1.5
        assert first.iterations == 2
        assert first.boxes == [3, 3, 3]
        assert first.min_ms <= first.avg_ms
        assert first.total_ms >= first.min_ms

    def test_source_untouched(self, test_image):
        before = test_image.copy()
        Benchmark.run(test_image, BenchmarkConfig(iterations=1, warmup=1, sigmas=[5.0]))
        np.testing.assert_array_equal(test_image, before)

    def test_invalid_iterations(self, test_image):
        with pytest.raises(ValueError):
            Benchmark.run(test_image, BenchmarkConfig(iterations=0, sigmas=[1.0]))


class TestBenchmarkResult:
    """Tests for BenchmarkResult serialization and output."""

    @pytest.fixture
    def result(self):
        return BenchmarkResult(
            name="demo",
            source_size=(640, 480),
            channels=3,
            source_megapixels=0.3072,
            results=[
                SigmaResult(
                    sigma=50.0,
                    boxes=[57, 57, 59],
                    iterations=10,
                    total_ms=250.0,
                    avg_ms=25.0,
                    min_ms=24.0,
                    megapixels_per_s=12.3,
                ),
            ],
        )

    def test_json_round_trip(self, result):
        data = json.loads(result.to_json())
        restored = BenchmarkResult.from_dict(data)
        assert restored == result

    def test_ascii_table(self, result):
        table = result.ascii_table()
        assert "BENCHMARK: demo" in table
        assert "640x480x3" in table
        assert "57,57,59" in table
        assert "25.0ms" in table

    def test_print(self, result, capsys):
        result.print()
        assert "BENCHMARK: demo" in capsys.readouterr().out
