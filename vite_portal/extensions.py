from __future__ import annotations

from typing import Optional

from flask import Flask, current_app

from vite_core import Vite
from vite_core.logging_utils import maybe_enable_json_logging

from .context import inject_vite


def init_vite(app: Flask, vite: Optional[Vite] = None, json_logs: Optional[bool] = None) -> Vite:
    """Registers the asset facade on ``app`` and exposes the Jinja helpers.

    ``json_logs`` switches vite_core logs to JSON lines; None defers to JSON_LOGS.
    """
    maybe_enable_json_logging(json_logs)
    vite = vite or Vite()
    app.extensions["vite"] = vite
    app.context_processor(inject_vite)
    return vite


def current_vite(app: Optional[Flask] = None) -> Vite:
    app = app or current_app
    vite = app.extensions.get("vite")
    if vite is None:  # pragma: no cover
        raise RuntimeError("Vite extension not initialized")
    return vite
