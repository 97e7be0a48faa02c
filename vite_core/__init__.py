from .configuration import CLIENT_SCRIPT_PATH, Configuration, ViteOptions
from .exceptions import (
    ManifestNotFound,
    NoBuildPath,
    NoSuchConfiguration,
    NoSuchEntrypoint,
    ViteError,
)
from .manifest import Chunk, Manifest, resolve
from .settings import ViteConfigOptions, ViteSettings, get_settings, reset_settings_cache
from .tags import CallbackTagGenerator, DefaultTagGenerator, TagGenerator
from .vite import Vite

__all__ = [
    "CLIENT_SCRIPT_PATH",
    "Configuration",
    "ViteOptions",
    "Vite",
    "Chunk",
    "Manifest",
    "resolve",
    "TagGenerator",
    "DefaultTagGenerator",
    "CallbackTagGenerator",
    "ViteSettings",
    "ViteConfigOptions",
    "get_settings",
    "reset_settings_cache",
    "ViteError",
    "ManifestNotFound",
    "NoSuchEntrypoint",
    "NoBuildPath",
    "NoSuchConfiguration",
]
