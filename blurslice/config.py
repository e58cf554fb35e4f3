"""Library and command-line configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """blurslice settings, overridable through ``BLURSLICE_*`` env vars."""

    # Blur defaults
    DEFAULT_SIGMA: float = 2.0
    DEFAULT_OUTPUT: str = "blurred-out.png"

    # Logging
    LOG_LEVEL: str = "WARNING"

    # Benchmark settings
    BENCH_ITERATIONS: int = 10
    BENCH_WARMUP: int = 1
    BENCH_SIGMAS: list[float] = [50.0, 20.0, 1.5]

    model_config = {"env_prefix": "BLURSLICE_"}


settings = Settings()
