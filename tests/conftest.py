from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import pytest
from typer.testing import CliRunner


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def now() -> datetime:
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def isolated_dirs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Dict[str, Path]:
    """Point config and data paths at a temporary directory."""
    data_dir = tmp_path / "data"
    config_file = tmp_path / "config.toml"
    monkeypatch.setenv("FITPARSE_DATA_DIR", str(data_dir))
    monkeypatch.setenv("FITPARSE_CONFIG_FILE", str(config_file))
    monkeypatch.delenv("FITPARSE_ACTIVITY_LOG", raising=False)
    monkeypatch.delenv("FITPARSE_COMMON_LOGS", raising=False)
    return {"data_dir": data_dir, "config_file": config_file}


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo level and handler changes made by CLI invocations."""
    logger = logging.getLogger("fitparse")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
