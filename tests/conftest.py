"""
Pytest configuration and shared fixtures for the lifesim test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'lifesim' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifesim.core.grid import Grid  # noqa: E402
from lifesim.utils.config_loader import clear_config_cache  # noqa: E402


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


GRID_CFG = {"width": 8, "height": 6}

GENERATION_CFG = {"seed": 42, "living_probability": 0.5}

TIMING_CFG = {"speed": "fast"}

TRACKING_CFG = {"bounding_box": True}


@pytest.fixture
def valid_simulation_config_dict():
    """
    Fixture providing a complete valid simulation configuration dictionary.
    """
    return {
        "grid": dict(GRID_CFG),
        "generation": dict(GENERATION_CFG),
        "timing": dict(TIMING_CFG),
        "tracking": dict(TRACKING_CFG),
    }


@pytest.fixture
def minimal_simulation_config_dict():
    """
    Fixture providing a minimal valid configuration: only the grid section.
    """
    return {"grid": {"width": 4, "height": 4}}


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_simulation_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_simulation_config_dict, f)

    yield temp_yaml_file


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def make_grid():
    """
    Fixture returning a factory that builds a grid with the given live cells.

    Usage:
        grid = make_grid(5, 5, [(1, 2), (2, 2), (3, 2)])
    """

    def _make(width, height, alive=()):
        grid = Grid(width, height)
        for x, y in alive:
            grid.cell_at(x, y).set_state(True)
        return grid

    return _make


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
