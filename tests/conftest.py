"""
Pytest configuration and shared fixtures.

Provides test configuration instances, payload helpers, and sample series
for unit and integration tests.
"""

from pathlib import Path
from typing import Callable, List

import pandas as pd
import pytest

from basefee_sentinel.core.config import Comparator, Config, TrapConfig
from basefee_sentinel.data.codec import encode_uint256


@pytest.fixture
def mock_config(tmp_path) -> Config:
    """
    Fixture providing test configuration with explicit values.
    
    Used to override environment-based config in unit tests.
    Ensures tests run consistently regardless of .env settings.
    """
    return Config(
        log_level="WARNING",
        logs_dir=tmp_path / "logs",
        trap=TrapConfig(threshold_percent=3, comparator=Comparator.GTE),
    )


@pytest.fixture
def trap_settings() -> TrapConfig:
    """Inclusive 3% threshold, the calibration setting for documented cases."""
    return TrapConfig(threshold_percent=3, comparator=Comparator.GTE)


@pytest.fixture
def history() -> Callable[..., List[bytes]]:
    """
    Build a newest-first payload list from plain integers.

    Example:
        history(103, 100)  # current=103, previous=100
    """

    def _build(*values: int) -> List[bytes]:
        return [encode_uint256(v) for v in values]

    return _build


@pytest.fixture
def sample_series() -> List[int]:
    """Base fees (wei) with one 5% jump and one 2% wobble."""
    return [
        20_000_000_000,
        20_000_000_000,
        21_000_000_000,  # +5%
        21_420_000_000,  # +2%
        21_420_000_000,
    ]


@pytest.fixture
def sample_series_csv(tmp_path, sample_series) -> Path:
    """Sample series written to CSV with shuffled block numbers."""
    blocks = [19_000_000 + i for i in range(len(sample_series))]
    df = pd.DataFrame({"block": blocks, "basefee": sample_series})
    df = df.iloc[[2, 0, 4, 1, 3]]
    path = tmp_path / "fees.csv"
    df.to_csv(path, index=False)
    return path


def pytest_configure(config):
    """
    Pytest hook for custom configuration.
    
    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (deferred CI)"
    )
