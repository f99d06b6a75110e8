from pathlib import Path

import pytest

from textresource.services.loader_service import ResourceTextLoader


@pytest.fixture
def loader() -> ResourceTextLoader:
    return ResourceTextLoader(encoding="utf-8")


@pytest.fixture
def existing_file(tmp_path: Path) -> Path:
    path = tmp_path / "hello.txt"
    path.write_text("Ferris\n", encoding="utf-8")
    return path
