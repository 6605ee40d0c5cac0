"""Fixtures partagées — données de site, registry, website."""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from site_engine import Settings, Website, default_registry  # noqa: E402

SEEDS_DIR = Path(__file__).parent.parent / "seeds"


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def demo_path():
    return SEEDS_DIR / "demo_site.json"


@pytest.fixture
def site_data():
    """NavBar + Hero sur l'accueil, une page /about, header et footer partagés."""
    return {
        "locales": [{"code": "fr", "label": "Français", "default": True}, {"code": "en", "label": "English"}],
        "special_pages": {
            "header": {"sections": [{"type": "NavBar", "content": {"main": {"title": "ACME"}}}]},
            "footer": {"sections": [{"type": "Footer", "params": {"copyright": "© ACME"}}]},
            "left":   {"sections": [{"type": "Section", "content": {"main": {"title": "Menu"}}}]},
        },
        "pages": [
            {"route": "/", "title": "Accueil", "sections": [
                {"type": "Hero", "theme": "dark", "content": {"main": {"title": "Bienvenue"}}},
                {"type": "Section", "content": {"main": {"title": "Intro"}}},
            ]},
            {"route": "/about", "title": "À propos", "layout": {"footer": False}, "sections": [
                {"type": "Section", "content": {"main": {"title": "Équipe"}}},
            ]},
        ],
    }


@pytest.fixture
def website(site_data, registry, settings):
    return Website(site_data, registry=registry, settings=settings)
