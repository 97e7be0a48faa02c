from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates

from vite_core import Vite
from vite_core.logging_utils import maybe_enable_json_logging
from vite_core.templating import template_globals


def install_vite(
    templates: Jinja2Templates,
    vite: Optional[Vite] = None,
    json_logs: Optional[bool] = None,
) -> Vite:
    """Adds the asset helpers to the globals of a ``Jinja2Templates`` environment."""
    maybe_enable_json_logging(json_logs)
    vite = vite or Vite()
    templates.env.globals.update(template_globals(vite))
    return vite


def create_templates(
    directory: str | Path,
    vite: Optional[Vite] = None,
    json_logs: Optional[bool] = None,
) -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(directory))
    install_vite(templates, vite, json_logs=json_logs)
    return templates
