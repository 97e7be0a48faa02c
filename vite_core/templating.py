from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from markupsafe import Markup

from .vite import Vite


def template_globals(vite: Vite) -> Dict[str, Callable[..., Any]]:
    """Jinja helpers bound to ``vite``; HTML helpers return Markup so autoescape keeps the tags."""

    def vite_tag(entry_name: str, config: Optional[str] = None) -> Markup:
        return Markup(vite.get_tag(entry_name, config))

    def vite_tags(config: Optional[str] = None) -> Markup:
        return Markup(vite.get_tags(config))

    def vite_client(config: Optional[str] = None) -> Markup:
        return Markup(vite.get_client_script_tag(config))

    def vite_react_refresh(config: Optional[str] = None) -> Markup:
        return Markup(vite.get_react_refresh_runtime_script(config))

    def vite_asset(path: str, config: Optional[str] = None) -> str:
        return vite.get_asset_url(path, config)

    return {
        "vite": vite,
        "vite_tag": vite_tag,
        "vite_tags": vite_tags,
        "vite_client": vite_client,
        "vite_react_refresh": vite_react_refresh,
        "vite_asset": vite_asset,
    }
