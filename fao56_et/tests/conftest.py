"""
Pytest configuration and fixtures for fao56_et tests.

Provides common fixtures for testing.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def fao_example_18():
    """Daily inputs of FAO-56 Example 18 (Uccle, Brussels, 6 July)."""
    return {
        "tmax": 21.5,   # °C
        "tmin": 12.3,   # °C
        "rhmax": 84.0,  # %
        "rhmin": 63.0,  # %
        "ws": 2.78,     # m/s at 10 m
        "rs": 22.07,    # MJ m-2 day-1
        "rso": 30.90,   # MJ m-2 day-1
        "z": 100.0,     # m
        "lat": 50.80,   # degrees
        "doy": 187,
    }


@pytest.fixture
def monthly_temperatures():
    """Mean monthly air temperatures of FAO-56 Example 13 (°C)."""
    return {
        "t_prev": 14.1,  # March
        "t_curr": 16.1,  # April
        "t_next": 18.8,  # May
    }


@pytest.fixture(params=[
    (10.0, 0.3, 1.5),
    (10.0, 0.3, -1.5),
    (850.0, 0.45, 1.2),
    (100.0, 0.2, -0.4),
], ids=["positive-skew", "negative-skew", "flood-series", "mild-negative-skew"])
def skewed_params(request):
    """Pearson III (xm, cv, cs) triples with non-zero skewness."""
    return request.param


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(20240715)


@pytest.fixture
def probabilities():
    """Probabilities spanning both tails."""
    return np.array([0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999])


@pytest.fixture
def config_file(tmp_path):
    """YAML configuration file with CLI overrides."""
    path = tmp_path / "fao56.yaml"
    path.write_text(
        "angstrom_a: 0.25\n"
        "angstrom_b: 0.50\n"
        "emissivity_method: BRU\n"
        "seed: 7\n"
    )
    return path


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure logging for tests."""
    import logging
    from fao56_et.utils.logger import Logger

    Logger.configure_for_testing()
    logging.getLogger("fao56_et").setLevel(logging.DEBUG)
    yield
    logging.getLogger("fao56_et").setLevel(logging.WARNING)


@pytest.fixture
def log_records():
    """Messages written to loguru while the test runs."""
    from loguru import logger

    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(sink_id)
