"""Pytest configuration and fixtures."""

import logging

import numpy as np
import pytest
from PIL import Image

from huekey.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Start every test from default settings and quiet logging."""
    for name in ("STRATEGY", "PERCENTILE", "TOLERANCE", "LOG_LEVEL", "STRUCTURED_LOGS"):
        monkeypatch.delenv(f"HUEKEY_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()
    # CLI runs bind handlers to streams that are closed once the runner returns
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)


@pytest.fixture
def write_image(tmp_path):
    """Write a row-major list of pixel rows to a PNG and return its path."""

    def _write(name, rows):
        array = np.array(rows, dtype=np.uint8)
        path = tmp_path / name
        Image.fromarray(array).save(path)
        return path

    return _write


@pytest.fixture
def random_image():
    """A reproducible 32x48 RGB image."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(32, 48, 3), dtype=np.uint8)
