"""Pytest configuration and fixtures"""

from pathlib import Path

import pytest

from fixtures.models import AppConfig, Mode, Point, Server


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Settings file holding a ``Config``"""
    path = tmp_path / "settings.ron"
    path.write_text('Config(foo: "", bar: 0)\n', encoding="utf-8")
    return path


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        name="demo",
        debug=True,
        ratio=1.25,
        servers=[Server(host="localhost"), Server(host="example.com", port=443)],
        labels={"env": "dev", "quote": 'say "hi"\n'},
        token=None,
        mode=Mode.FAST,
        origin=Point(3, -4),
        size=(640, 480),
    )


@pytest.fixture
def isolated_dirs(tmp_path: Path, monkeypatch):
    """Working directory and platform config directory under tmp_path

    Returns ``(cwd, config_dir)``; neither holds a settings file yet.
    """
    from ron_settings import resolver

    cwd = tmp_path / "cwd"
    cfg = tmp_path / "config"
    cwd.mkdir()
    cfg.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setattr(resolver, "config_dir", lambda q, o, a: cfg)
    monkeypatch.delenv("BAR-APP_CONFIG_PATH", raising=False)
    return cwd, cfg
