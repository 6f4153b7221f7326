"""Shared fixtures: offscreen Qt and an isolated settings file."""

import os
import tempfile
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from expense_calc import config  # noqa: E402

# style.py writes its defaults on import; keep that out of the source tree.
config.CONFIG_FILE = Path(tempfile.mkdtemp()) / "expense_calc.ini"


@pytest.fixture(autouse=True)
def settings_file(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "expense_calc.ini"
    monkeypatch.setattr(config, "CONFIG_FILE", path)
    return path


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
