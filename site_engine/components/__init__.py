"""
Composants intégrés — exports publics + enregistrement dans un registry.
"""
from ..registry import ComponentRegistry, ComponentSpec
from . import footer, hero, navbar, tabs
from .fallback import render_fallback
from .footer import FooterParams, render_footer
from .hero import HeroParams, render_hero
from .navbar import NavBarParams, render_navbar
from .section import render_main, render_section
from .tabs import render_tabs


def register_builtin_components(registry: ComponentRegistry) -> ComponentRegistry:
    """NavBar, Hero, Section, Tabs, Footer + composant de repli."""
    registry.register("NavBar", render_navbar, defaults=navbar.DEFAULTS)
    registry.register("Hero", render_hero, context=hero.CONTEXT, defaults=hero.DEFAULTS)
    registry.register("Section", render_section)
    registry.register("Tabs", render_tabs, state=tabs.STATE)
    registry.register("Footer", render_footer, defaults=footer.DEFAULTS)
    registry.fallback = ComponentSpec(name="Fallback", render=render_fallback)
    return registry


__all__ = [
    "register_builtin_components",
    "render_navbar", "NavBarParams",
    "render_hero", "HeroParams",
    "render_section", "render_main",
    "render_tabs",
    "render_footer", "FooterParams",
    "render_fallback",
]
