from __future__ import annotations

import threading
from typing import Dict, Optional

from .configuration import CLIENT_SCRIPT_PATH, Configuration, ViteOptions
from .entrypoints import EntrypointsFinder, FilesystemEntrypointsFinder
from .exceptions import NoSuchConfiguration
from .heartbeat import HeartbeatChecker, HttpHeartbeatChecker
from .settings import ViteSettings, get_settings


class Vite:
    """Facade over the named configurations.

    Configurations are built lazily from settings and kept for the lifetime
    of the facade. The shortcuts below act on the default configuration.
    """

    CLIENT_SCRIPT_PATH = CLIENT_SCRIPT_PATH

    def __init__(
        self,
        settings: ViteSettings | None = None,
        options: ViteOptions | None = None,
        heartbeat_checker: HeartbeatChecker | None = None,
        entrypoints_finder: EntrypointsFinder | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.options = options or ViteOptions()
        self.heartbeat_checker = heartbeat_checker or HttpHeartbeatChecker(self.settings.ping_cache_ttl)
        self.entrypoints_finder = entrypoints_finder or FilesystemEntrypointsFinder(self.settings.base_path)
        self._configs: Dict[str, Configuration] = {}
        self._lock = threading.Lock()

    def config(self, name: Optional[str] = None) -> Configuration:
        """Gets the given configuration or the default one."""
        name = name or self.settings.default_config
        with self._lock:
            configuration = self._configs.get(name)
            if configuration is None:
                options = self.settings.configs.get(name)
                if options is None:
                    raise NoSuchConfiguration(name)
                configuration = Configuration(
                    name,
                    options=options,
                    settings=self.settings,
                    vite_options=self.options,
                    entrypoints_finder=self.entrypoints_finder,
                    heartbeat_checker=self.heartbeat_checker,
                )
                self._configs[name] = configuration
        return configuration

    def config_names(self) -> list[str]:
        return list(self.settings.configs)

    def get_tag(self, entry_name: str, config: Optional[str] = None) -> str:
        return self.config(config).get_tag(entry_name)

    def get_tags(self, config: Optional[str] = None) -> str:
        return self.config(config).get_tags()

    def get_entries(self, config: Optional[str] = None) -> list[str]:
        return self.config(config).get_entries()

    def get_client_script_tag(self, config: Optional[str] = None) -> str:
        return self.config(config).get_client_script_tag()

    def get_react_refresh_runtime_script(self, config: Optional[str] = None) -> str:
        return self.config(config).get_react_refresh_runtime_script()

    def get_asset_url(self, path: str, config: Optional[str] = None) -> str:
        return self.config(config).get_asset_url(path)

    def get_hash(self, config: Optional[str] = None) -> Optional[str]:
        return self.config(config).get_hash()

    def uses_manifest(self, config: Optional[str] = None) -> bool:
        return self.config(config).uses_manifest()

    def uses_server(self, config: Optional[str] = None) -> bool:
        return self.config(config).uses_server()
