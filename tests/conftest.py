from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

# Ensure project root is importable as a module path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vite_core.settings import ViteSettings, reset_settings_cache


SAMPLE_MANIFEST = {
    "resources/scripts/main.ts": {
        "file": "assets/main.abc123.js",
        "src": "resources/scripts/main.ts",
        "isEntry": True,
        "css": ["assets/main.css", "assets/vendor.css"],
        "imports": ["_vendor.js"],
        "integrity": "sha384-main",
    },
    "_vendor.js": {
        "file": "assets/vendor.def456.js",
    },
    "resources/styles/app.css": {
        "file": "assets/app.789.css",
        "src": "resources/styles/app.css",
        "isEntry": True,
    },
}


class FakeHeartbeat:
    """Records pings and answers with a fixed liveness."""

    def __init__(self, alive: bool = True) -> None:
        self.alive = alive
        self.calls: list[tuple[str, float]] = []

    def ping(self, url: str, timeout: float) -> bool:
        self.calls.append((url, timeout))
        return self.alive


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    for key in ("APP_ENV", "VITE_CONFIGS", "VITE_DEFAULT_CONFIG", "VITE_TESTING_USE_MANIFEST",
                "ASSET_URL", "JSON_LOGS", "VITE_BASE_PATH", "VITE_PUBLIC_PATH", "VITE_PING_CACHE_TTL"):
        monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def write_manifest(tmp_path):
    """Write a manifest under ``<tmp>/public/<build_path>/manifest.json``."""

    def _write(data: dict | None = None, build_path: str = "build") -> Path:
        path = tmp_path / "public" / build_path / "manifest.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(SAMPLE_MANIFEST if data is None else data), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def make_settings(tmp_path):
    def _make(**overrides) -> ViteSettings:
        values = {"app_env": "production", "base_path": tmp_path}
        values.update(overrides)
        return ViteSettings(**values)

    return _make


@pytest.fixture()
def heartbeat():
    return FakeHeartbeat(alive=True)


@pytest.fixture()
def vite_logger():
    """The ``vite_core`` logger, restored after the test."""
    logger = logging.getLogger("vite_core")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
    for h in handlers:
        logger.addHandler(h)
    logger.setLevel(level)
    logger.propagate = propagate
