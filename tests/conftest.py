"""Shared fixtures for the po2elm tests."""
import pathlib
from typing import Callable

import pytest

CatalogDirFactory = Callable[[dict[str, str]], pathlib.Path]


@pytest.fixture
def catalog_dir(tmp_path: pathlib.Path) -> CatalogDirFactory:
    """Fixture writing a folder of catalogs from a {filename: text} mapping."""

    def factory(files: dict[str, str]) -> pathlib.Path:
        folder = tmp_path / "po"
        folder.mkdir(exist_ok=True)
        for name, text in files.items():
            (folder / name).write_text(text, encoding="utf-8")
        return folder

    return factory
