"""Renderers — HTML par défaut."""
from .base import Renderer
from .css import generate_block_themes, generate_css_variables, generate_site_css
from .html import HtmlRenderer

__all__ = ["Renderer", "HtmlRenderer", "generate_css_variables", "generate_block_themes", "generate_site_css"]
