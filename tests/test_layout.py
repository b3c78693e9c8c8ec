"""The top-level packages are plain directories next to pyproject.toml."""

from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


@pytest.mark.parametrize("name", ["core", "cli", "web"])
def test_package_resolves_to_repo_directory(name: str) -> None:
    module = __import__(name)
    paths = [Path(p).resolve() for p in module.__path__]

    assert ROOT / name in paths
