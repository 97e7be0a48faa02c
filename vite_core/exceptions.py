from __future__ import annotations

from typing import Optional

from .settings import ViteSettings, get_settings


class ViteError(Exception):
    """Base class for asset resolution errors.

    Every error carries the name of the configuration it was raised for (when
    known) and can describe how to fix it through :meth:`solution`.
    """

    def __init__(self, message: str, config_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.config_name = config_name

    def has_config_name(self) -> bool:
        return bool(self.config_name)

    def solution(self, settings: ViteSettings | None = None) -> str:
        return ""


class ManifestNotFound(ViteError):
    def __init__(self, manifest_path, config_name: Optional[str] = None) -> None:
        self.manifest_path = str(manifest_path)
        if config_name:
            message = f'The manifest for the "{config_name}" configuration could not be found.'
        else:
            message = "The manifest could not be found."
        super().__init__(f"{message} Expected it at {self.manifest_path}.", config_name)

    def _base_command(self, settings: ViteSettings) -> str:
        command = "npm run"
        for lock_file, candidate in (("pnpm-lock.yaml", "pnpm"), ("yarn.lock", "yarn")):
            if (settings.base_path / lock_file).exists():
                command = candidate
        return command

    def command(self, settings: ViteSettings | None = None) -> str:
        settings = settings or get_settings()
        kind = "dev" if settings.is_environment("local") else "build"
        command = f"{self._base_command(settings)} {kind}"
        if self.has_config_name():
            command += f" --config vite.{self.config_name}.config.ts"
        return command

    def solution(self, settings: ViteSettings | None = None) -> str:
        settings = settings or get_settings()
        if settings.is_environment("local"):
            title = "Start the development server"
        else:
            title = "Build the production assets"
        return f"{title}: run `{self.command(settings)}` in your terminal and refresh the page."


class NoSuchEntrypoint(ViteError):
    def __init__(
        self,
        entry: str,
        config_name: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        self.entry = entry
        super().__init__(message or f'Entry "{entry}" could not be found.', config_name)

    @classmethod
    def in_manifest(cls, entry: str, config_name: Optional[str] = None) -> "NoSuchEntrypoint":
        return cls(entry, config_name, f'Entry "{entry}" does not exist in the manifest.')

    @classmethod
    def in_configuration(cls, entry: str, config_name: str) -> "NoSuchEntrypoint":
        return cls(entry, config_name, f'Entry "{entry}" could not be found in the configuration.')

    def solution(self, settings: ViteSettings | None = None) -> str:
        return (
            "That entry point should be defined by the "
            f"`configs.{self.config_name or 'default'}.entrypoints` option."
        )


class NoBuildPath(ViteError):
    def __init__(self, config_name: Optional[str] = None) -> None:
        if config_name:
            message = f'The build path for the "{config_name}" configuration is not defined.'
        else:
            message = "The build path is not defined."
        super().__init__(message, config_name)

    def solution(self, settings: ViteSettings | None = None) -> str:
        return (
            f"Define `configs.{self.config_name or 'default'}.build_path`. "
            "It cannot be empty because the public directory would be emptied by the build."
        )


class NoSuchConfiguration(ViteError):
    def __init__(self, config_name: str) -> None:
        super().__init__(f'The "{config_name}" configuration does not exist.', config_name)

    def solution(self, settings: ViteSettings | None = None) -> str:
        return f"Add a `{self.config_name}` entry to VITE_CONFIGS."


__all__ = [
    "ViteError",
    "ManifestNotFound",
    "NoSuchEntrypoint",
    "NoBuildPath",
    "NoSuchConfiguration",
]
