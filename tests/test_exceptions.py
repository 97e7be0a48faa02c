from __future__ import annotations

from vite_core.exceptions import (
    ManifestNotFound,
    NoBuildPath,
    NoSuchConfiguration,
    NoSuchEntrypoint,
    ViteError,
)


def test_all_errors_share_a_base():
    for error in (
        ManifestNotFound("/x/manifest.json"),
        NoSuchEntrypoint("main"),
        NoBuildPath(),
        NoSuchConfiguration("admin"),
    ):
        assert isinstance(error, ViteError)


def test_manifest_not_found_messages():
    assert str(ManifestNotFound("/m.json")).startswith("The manifest could not be found.")
    error = ManifestNotFound("/public/build/manifest.json", "build")
    assert error.has_config_name()
    assert 'The manifest for the "build" configuration could not be found.' in str(error)


def test_manifest_not_found_suggests_build_outside_local(make_settings):
    error = ManifestNotFound("/m.json", "admin")
    settings = make_settings(app_env="production")
    assert error.command(settings) == "npm run build --config vite.admin.config.ts"
    assert error.solution(settings).startswith("Build the production assets")


def test_manifest_not_found_suggests_dev_server_locally(make_settings, tmp_path):
    (tmp_path / "yarn.lock").write_text("", encoding="utf-8")
    error = ManifestNotFound("/m.json")
    settings = make_settings(app_env="local")
    assert error.command(settings) == "yarn dev"
    assert "Start the development server" in error.solution(settings)


def test_pnpm_lock_file_is_detected(make_settings, tmp_path):
    (tmp_path / "pnpm-lock.yaml").write_text("", encoding="utf-8")
    assert ManifestNotFound("/m.json").command(make_settings()) == "pnpm build"


def test_no_such_entrypoint_variants():
    assert str(NoSuchEntrypoint("main")) == 'Entry "main" could not be found.'
    assert str(NoSuchEntrypoint.in_manifest("main", "build")) == 'Entry "main" does not exist in the manifest.'
    error = NoSuchEntrypoint.in_configuration("main", "admin")
    assert error.config_name == "admin"
    assert "configs.admin.entrypoints" in error.solution()


def test_no_build_path_message():
    assert str(NoBuildPath("admin")) == 'The build path for the "admin" configuration is not defined.'
    assert str(NoBuildPath()) == "The build path is not defined."
    assert "configs.admin.build_path" in NoBuildPath("admin").solution()
