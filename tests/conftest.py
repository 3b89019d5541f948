from __future__ import annotations

from pathlib import Path

import pytest

from iniview.core import config as config_mod


@pytest.fixture(autouse=True)
def _no_global_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # keep the machine's own config out of every test
    monkeypatch.setattr(
        config_mod, "DEFAULT_GLOBAL_CONFIG_FILES", (str(tmp_path / "no-such-global.toml"),)
    )


@pytest.fixture()
def write_ini(tmp_path: Path):
    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _write
