import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `wildfire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def sample_grid_size():
    """Provide a standard grid size for tests."""
    return (10, 10)


@pytest.fixture
def full_forest():
    """A 3x3 forest where every cell holds a living tree."""
    from wildfire.forest import Forest

    return Forest.from_rows(["TTT", "TTT", "TTT"])
