"""FastAPI integration exposing the Vite asset helpers to Jinja2Templates."""

from .templating import create_templates, install_vite  # noqa: F401

__all__ = ["install_vite", "create_templates"]
