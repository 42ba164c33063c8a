"""
Pytest configuration and fixtures for PyNoiseFlow test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker, description in (
        ("unit", "fast tests of a single component"),
        ("integration", "tests rendering complete images"),
        ("importtest", "module import tests"),
        ("slow", "tests taking more than a second"),
    ):
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


PRIMARIES_HEX = "000000\nff0000\n00ff00\n0000ff\nffffff"


@pytest.fixture
def seeds():
    """Seed source with a fixed root seed."""
    from pynoiseflow.noise import SeedSource
    return SeedSource(42)


@pytest.fixture
def zero_field():
    """Scalar field that is zero everywhere."""
    from pynoiseflow.noise import ConstantNoise, ScalarNoiseField
    return ScalarNoiseField(ConstantNoise(0.0))


@pytest.fixture
def constant_flow():
    """Factory for flow fields with constant raw vectors."""
    from pynoiseflow.noise import ConstantNoise, Noise2x2, ScalarNoiseField

    def make(vx, vy, normalize=False, bias=(0.0, 0.0), pos_scale=1.0):
        return Noise2x2(ScalarNoiseField(ConstantNoise(vx)), ScalarNoiseField(ConstantNoise(vy)),
                        pos_scale=pos_scale, normalize=normalize, bias=bias)

    return make


@pytest.fixture
def primaries_hex():
    return PRIMARIES_HEX


@pytest.fixture
def palette_file(tmp_path):
    """Palette file holding black, red, green, blue and white."""
    path = tmp_path / "primaries.hex"
    path.write_text(PRIMARIES_HEX + "\n", encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def sample_positions():
    """Reproducible pixel positions spread over an 800x600 canvas."""
    rng = np.random.default_rng(1234)
    return np.column_stack([rng.uniform(-50, 850, 200), rng.uniform(-50, 650, 200)])
