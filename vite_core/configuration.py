from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .entrypoints import EntrypointsFinder, FilesystemEntrypointsFinder
from .exceptions import NoBuildPath, NoSuchEntrypoint
from .heartbeat import HeartbeatChecker, HttpHeartbeatChecker
from .manifest import Chunk, Manifest
from .settings import ViteConfigOptions, ViteSettings, get_settings
from .tags import TagCallback, TagGenerator, is_style_path, make_tag_generator, render_chunk


logger = logging.getLogger("vite_core.configuration")

CLIENT_SCRIPT_PATH = "@vite/client"

REACT_REFRESH_SCRIPT = """<script type="module">
    import RefreshRuntime from "{url}/@react-refresh"
    RefreshRuntime.injectIntoGlobalHook(window)
    window.$RefreshReg$ = () => {{}}
    window.$RefreshSig$ = () => (type) => type
    window.__vite_plugin_react_preamble_installed__ = true
</script>"""


class ViteOptions:
    """Host hooks, fixed when the facade is built.

    - ``make_script_tag(url, chunk)`` / ``make_style_tag(url, chunk)`` replace
      the default markup and are returned verbatim.
    - ``use_manifest(configuration)`` may force the mode; returning None
      defers to the regular checks.
    """

    def __init__(
        self,
        make_script_tag: TagCallback | None = None,
        make_style_tag: TagCallback | None = None,
        use_manifest: Callable[["Configuration"], Optional[bool]] | None = None,
    ) -> None:
        self.make_script_tag = make_script_tag
        self.make_style_tag = make_style_tag
        self.use_manifest = use_manifest

    def tag_generator(self) -> TagGenerator:
        return make_tag_generator(self.make_script_tag, self.make_style_tag)


class Configuration:
    """One named Vite configuration: decides between manifest and dev server
    and renders the matching tags."""

    def __init__(
        self,
        name: str,
        options: ViteConfigOptions | None = None,
        settings: ViteSettings | None = None,
        vite_options: ViteOptions | None = None,
        manifest: Manifest | None = None,
        entrypoints_finder: EntrypointsFinder | None = None,
        heartbeat_checker: HeartbeatChecker | None = None,
        tag_generator: TagGenerator | None = None,
    ) -> None:
        self.name = name
        self.settings = settings or get_settings()
        self.options = options or ViteConfigOptions()
        self.vite_options = vite_options or ViteOptions()
        self._manifest = manifest
        self.entrypoints_finder = entrypoints_finder or FilesystemEntrypointsFinder(self.settings.base_path)
        self.heartbeat_checker = heartbeat_checker or HttpHeartbeatChecker(self.settings.ping_cache_ttl)
        self.tag_generator = tag_generator or self.vite_options.tag_generator()

    # Manifest

    def _require_build_path(self) -> str:
        if not self.options.build_path:
            raise NoBuildPath(self.name)
        return self.options.build_path

    def get_manifest_path(self) -> Path:
        return self.settings.resolved_public_path / self._require_build_path() / "manifest.json"

    def get_manifest(self) -> Manifest:
        """Returns the manifest, reading it from disk on first use."""
        self._require_build_path()
        if self._manifest is None:
            self._manifest = Manifest.read(self.get_manifest_path())
        return self._manifest

    def clear_manifest_cache(self) -> None:
        self._manifest = None

    def get_hash(self) -> Optional[str]:
        """md5 of the manifest file, or None when it has not been built."""
        path = self.get_manifest_path()
        if not path.exists():
            return None
        return hashlib.md5(path.read_bytes()).hexdigest()  # nosec - versioning only

    # Mode selection

    def uses_manifest(self) -> bool:
        use, reason = self._decide()
        logger.debug(
            "Asset mode decided: %s",
            reason,
            extra={"config": self.name, "mode": "manifest" if use else "server"},
        )
        return use

    def uses_server(self) -> bool:
        return not self.uses_manifest()

    def _decide(self) -> Tuple[bool, str]:
        hook = self.vite_options.use_manifest
        if hook is not None:
            result = hook(self)
            if result is not None:
                return bool(result), "override"

        dev_server = self.options.dev_server
        if not dev_server.enabled:
            return True, "dev server disabled"

        if self.settings.is_environment("testing") and not self.settings.testing_use_manifest:
            return False, "testing without manifest"

        if not self.settings.is_environment("local"):
            return True, f"environment {self.settings.app_env}"

        if not dev_server.ping_before_using_manifest:
            return False, "ping disabled"

        if not self.is_development_server_running():
            return True, "dev server not running"

        return False, "dev server running"

    def is_development_server_running(self) -> bool:
        dev_server = self.options.dev_server
        url = dev_server.ping_url or dev_server.url
        return self.heartbeat_checker.ping(url, dev_server.ping_timeout)

    # URLs

    def get_asset_url(self, path: str) -> str:
        """URL of a built asset, or of a source file on the dev server."""
        if self.uses_manifest():
            return self._build_url(path)
        return self._server_url(path)

    def _build_url(self, path: str) -> str:
        return f"{self.settings.asset_url}/{self._require_build_path()}/{path.lstrip('/')}"

    def _server_url(self, path: str) -> str:
        return f"{self.options.dev_server.url.rstrip('/')}/{path.lstrip('/')}"

    # Tags

    def _development_tag(self, path: str) -> str:
        url = self._server_url(path)
        if is_style_path(path):
            return self.tag_generator.make_style_tag(url)
        return self.tag_generator.make_script_tag(url)

    def _chunk_html(self, chunk: Chunk) -> str:
        return "".join(render_chunk(chunk, self.tag_generator, self._build_url))

    def find_entrypoints(self) -> List[str]:
        """Relative POSIX paths of the development entrypoints."""
        entrypoints = self.options.entrypoints
        found = self.entrypoints_finder.find(entrypoints.paths, entrypoints.ignore)
        base = self.settings.base_path
        paths: List[str] = []
        for file in found:
            try:
                paths.append(Path(file).relative_to(base).as_posix())
            except ValueError:
                paths.append(Path(file).as_posix().lstrip("/"))
        return paths

    def get_tag(self, entry_name: str) -> str:
        if self.uses_manifest():
            return self._chunk_html(self.get_manifest().get_entry(entry_name))

        for path in self.find_entrypoints():
            if entry_name in path:
                return self._development_tag(path)
        raise NoSuchEntrypoint.in_configuration(entry_name, self.name)

    def get_entries(self) -> List[str]:
        return self._entries(self.uses_manifest())

    def _entries(self, use_manifest: bool) -> List[str]:
        if use_manifest:
            return [self._chunk_html(chunk) for chunk in self.get_manifest().get_entries()]
        return [self._development_tag(path) for path in self.find_entrypoints()]

    def get_tags(self) -> str:
        # One decision for the whole block so the ping runs at most once
        use_manifest = self.uses_manifest()
        tags = [] if use_manifest else [self._development_tag(CLIENT_SCRIPT_PATH)]
        tags.extend(self._entries(use_manifest))
        return "".join(tags)

    def get_client_script_tag(self) -> str:
        if self.uses_manifest():
            return ""
        return self._development_tag(CLIENT_SCRIPT_PATH)

    def get_react_refresh_runtime_script(self) -> str:
        if self.uses_manifest():
            return ""
        return REACT_REFRESH_SCRIPT.format(url=self.options.dev_server.url.rstrip("/"))

    def __repr__(self) -> str:
        return f"Configuration(name={self.name!r})"
