import os
import sys

import pytest

# Add project root to sys.path (so tests run without an install)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, PROJECT_ROOT)

from gridham.core.grid import GridGraph


def all_pairs(n, m):
    """Every unordered pair of distinct vertices of G(n, m)."""
    cells = list(GridGraph(n, m).vertices())
    for i, v in enumerate(cells):
        for w in cells[i + 1:]:
            yield v, w


def small_shapes(max_cells):
    for n in range(1, max_cells + 1):
        for m in range(1, max_cells + 1):
            if n * m <= max_cells:
                yield n, m


@pytest.fixture
def tmp_config(tmp_path):
    """Returns a function that writes YAML text to a file and returns its path."""
    def _write(text, name="gridham.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def grid_4x4():
    return GridGraph(4, 4)
