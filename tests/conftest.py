"""
-------
conftest.py
-------
Shared pytest fixtures for solandra_svg tests.
"""

import pytest
import matplotlib
matplotlib.use("Agg")  # headless backend for previews
import matplotlib.pyplot as plt

from solandra_svg import SolandraSvg, Path, Attributes


# -----------------------------------------------------------------------------
# Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
    """
    Create and yield an isolated Matplotlib Figure/Axes pair.

    The figure is automatically closed after the test.
    """
    fig, ax = plt.subplots(figsize=(4, 3))
    yield fig, ax
    plt.close(fig)


# -----------------------------------------------------------------------------
# Canvas fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def square_canvas() -> SolandraSvg:
    """100x100 seeded canvas (aspect ratio 1)."""
    return SolandraSvg(100, 100, seed=1)


@pytest.fixture
def wide_canvas() -> SolandraSvg:
    """200x100 seeded canvas (aspect ratio 2)."""
    return SolandraSvg(200, 100, seed=7)


@pytest.fixture
def empty_path() -> Path:
    return Path(Attributes())


@pytest.fixture
def zigzag() -> Path:
    """Open polyline with sharp alternating turns."""
    return (
        Path()
        .move_to((0, 0))
        .line_to((1, 1))
        .line_to((2, 0))
        .line_to((3, 1))
        .line_to((4, 0))
    )
