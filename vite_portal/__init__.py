"""Flask integration exposing the Vite asset helpers to Jinja templates."""

from .extensions import current_vite, init_vite  # noqa: F401

__all__ = ["init_vite", "current_vite"]
