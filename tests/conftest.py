from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from maven_notifier.config import PROPERTIES_FILE_NAME


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("notifyWith", "NOTIFYWITH", "notifywith", "notify_with", "NOTIFY_WITH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def artifact_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "lib"
    directory.mkdir()
    return directory


@pytest.fixture
def write_properties(artifact_dir: Path) -> Callable[[str], Path]:
    def _write(text: str) -> Path:
        path = artifact_dir / PROPERTIES_FILE_NAME
        path.write_text(text, encoding="latin-1")
        return path

    return _write
