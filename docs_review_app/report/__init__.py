"""Message catalogues and Jinja2 rendering."""
from .i18n import get_translator, lookup
from .renderer import render

__all__ = ["get_translator", "lookup", "render"]
