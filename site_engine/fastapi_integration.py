"""
Helpers pour intégration FastAPI.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from .config import Settings, get_settings
from .errors import StructuralError
from .loader import load_website
from .registry import ComponentRegistry
from .router import get_renderer, get_website, install_website, render_route, router
from .website import Website

log = logging.getLogger(__name__)


def create_site_app(
    website: Optional[Website] = None,
    *,
    settings: Optional[Settings] = None,
    registry: Optional[ComponentRegistry] = None,
) -> FastAPI:
    """
    Crée l'application qui sert un site : router /site + une route par page.

    Example:
        >>> app = create_site_app(Website(site_data))
        >>> # uvicorn — GET /about → HTML de la page /about
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")

    if website is None:
        if not settings.site_data_path:
            raise StructuralError("Aucun Website fourni et SITE_DATA_PATH non défini")
        website = load_website(settings.site_data_path, registry=registry, settings=settings)

    from . import __version__

    app = FastAPI(title="site_engine", version=__version__)
    app.state.settings = settings
    app.include_router(router)
    install_website(app, website)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "site_engine", "version": __version__}

    @app.get("/{route:path}", response_class=HTMLResponse)
    async def page(route: str, request: Request, locale: Optional[str] = None):
        website = get_website(request)
        return render_route(website, get_renderer(request, website), "/" + route, locale)

    log.info("Application site_engine prête — %d pages", len(website.pages))
    return app
