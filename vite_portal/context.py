from __future__ import annotations

from flask import current_app

from vite_core.templating import template_globals


def inject_vite():
    """Inject asset helpers for templates of the current app."""

    return template_globals(current_app.extensions["vite"])
