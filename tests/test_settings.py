from __future__ import annotations

import json
from pathlib import Path

from vite_core.settings import ViteConfigOptions, ViteSettings, get_settings, reset_settings_cache


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = ViteSettings()
    assert settings.app_env == "production"
    assert settings.default_config == "default"
    assert settings.testing_use_manifest is False
    assert settings.base_path == tmp_path
    assert settings.resolved_public_path == tmp_path / "public"
    options = settings.configs["default"]
    assert options.build_path == "build"
    assert options.entrypoints.paths == ["resources/scripts/main.ts"]
    assert options.dev_server.url == "http://localhost:3000"
    assert options.dev_server.ping_timeout == 1.0
    assert options.dev_server.enabled is True
    assert options.dev_server.ping_before_using_manifest is True


def test_environment_variables(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", " Local ")
    monkeypatch.setenv("VITE_TESTING_USE_MANIFEST", "yes")
    monkeypatch.setenv("VITE_PUBLIC_PATH", "web")
    monkeypatch.setenv("VITE_BASE_PATH", str(tmp_path))
    monkeypatch.setenv(
        "VITE_CONFIGS",
        json.dumps(
            {
                "app": {"build_path": "/build/app/", "entrypoints": {"paths": "resources/app.ts"}},
                "admin": {"dev_server": {"url": "http://localhost:3001", "ping_url": "", "enabled": "off"}},
            }
        ),
    )
    settings = ViteSettings()
    assert settings.is_environment("local")
    assert settings.testing_use_manifest is True
    assert settings.resolved_public_path == tmp_path / "web"
    assert set(settings.configs) == {"app", "admin"}
    assert settings.configs["app"].build_path == "build/app"
    assert settings.configs["app"].entrypoints.paths == ["resources/app.ts"]
    assert settings.configs["admin"].dev_server.ping_url is None
    assert settings.configs["admin"].dev_server.enabled is False


def test_absolute_public_path_wins(tmp_path):
    settings = ViteSettings(base_path=tmp_path, public_path=Path("/srv/www"))
    assert settings.resolved_public_path == Path("/srv/www")


def test_blank_build_path_means_unconfigured():
    assert ViteConfigOptions(build_path="  ").build_path is None
    assert ViteConfigOptions(build_path=None).build_path is None


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    assert get_settings() is first
    monkeypatch.setenv("APP_ENV", "local")
    assert get_settings().app_env == "production"
    reset_settings_cache()
    assert get_settings().app_env == "local"


def test_nested_variables_override_one_option(monkeypatch, tmp_path):
    monkeypatch.setenv("VITE_CONFIGS", json.dumps({"default": {}, "admin": {"build_path": "admin"}}))
    monkeypatch.setenv("VITE_CONFIGS__DEFAULT__BUILD_PATH", "dist")
    monkeypatch.setenv("VITE_CONFIGS__ADMIN__DEV_SERVER__URL", "http://localhost:3001")
    settings = ViteSettings(base_path=tmp_path)
    assert settings.configs["default"].build_path == "dist"
    assert settings.configs["admin"].build_path == "admin"
    assert settings.configs["admin"].dev_server.url == "http://localhost:3001"


def test_nested_variable_without_json(monkeypatch, tmp_path):
    monkeypatch.setenv("VITE_CONFIGS__DEFAULT__DEV_SERVER__PING_TIMEOUT", "2.5")
    settings = ViteSettings(base_path=tmp_path)
    assert settings.configs["default"].dev_server.ping_timeout == 2.5
