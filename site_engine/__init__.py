"""
site_engine v0.3 — modèle objet runtime Website → Page → Block + bridge d'état.

Usage:
    >>> from site_engine import Website, HookHost
    >>> website = Website({"pages": [{"route": "/", "sections": [{"type": "NavBar"}, {"type": "Hero"}]}]})
    >>> navbar = website.active_page.body[0]
    >>> navbar.get_next_block_info()["context"]["allowTranslucentTop"]
    True

Usage (rendu HTML):
    >>> from site_engine import HtmlRenderer
    >>> html = HtmlRenderer(website).render_page()

Usage (FastAPI):
    >>> from site_engine import create_site_app
    >>> app = create_site_app(website)
"""

from .errors import SiteEngineError, StructuralError, PageNotFound
from .config import Settings, get_settings
from .core.schemas import SiteData, PageData, SectionData, SpecialPageData, LocaleInfo, PageLayout
from .bridge import StateCell, StateHook, ReactiveCell, HookHost, cell_state_hook
from .registry import ComponentRegistry, ComponentSpec, FALLBACK_COMPONENT, default_registry
from .block import Block, BlockInfo, BlockStatus
from .page import Page
from .website import Website
from .loader import load_site_data, load_website
from .renderer.html import HtmlRenderer

__version__ = "0.3.0"


def create_site_app(*args, **kwargs):
    """Import paresseux : FastAPI n'est chargé que pour l'hébergement HTTP."""
    from .fastapi_integration import create_site_app as _create
    return _create(*args, **kwargs)


__all__ = [
    # erreurs / config
    "SiteEngineError", "StructuralError", "PageNotFound",
    "Settings", "get_settings",
    # données
    "SiteData", "PageData", "SectionData", "SpecialPageData", "LocaleInfo", "PageLayout",
    # bridge
    "StateCell", "StateHook", "ReactiveCell", "HookHost", "cell_state_hook",
    # registry
    "ComponentRegistry", "ComponentSpec", "FALLBACK_COMPONENT", "default_registry",
    # modèle runtime
    "Block", "BlockInfo", "BlockStatus", "Page", "Website",
    # chargement / rendu
    "load_site_data", "load_website", "HtmlRenderer", "create_site_app",
]
