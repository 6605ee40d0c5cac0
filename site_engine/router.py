"""
Router FastAPI — expose le runtime d'un Website chargé.

GET  /site/pages                 → hiérarchie des pages + page active
GET  /site/locales               → locales + locale active
GET  /site/blocks?route=/        → infos des blocs rendus d'une page
GET  /site/render?route=/        → HTML complet de la page
POST /site/reload                → reconstruit le Website depuis SITE_DATA_PATH

Le Website actif n'est accessible que via app.state.website (install_website).
"""
import html
import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse

from .config import Settings
from .errors import PageNotFound, StructuralError
from .loader import load_website
from .renderer.html import HtmlRenderer
from .website import Website

log = logging.getLogger(__name__)

router = APIRouter(prefix="/site", tags=["site_engine"])


def install_website(app: FastAPI, website: Website, renderer: Optional[HtmlRenderer] = None) -> HtmlRenderer:
    """Installe (ou remplace en bloc) le Website servi par l'application."""
    app.state.website = website
    app.state.renderer = renderer or HtmlRenderer(website)
    return app.state.renderer


def get_website(request: Request) -> Website:
    website = getattr(request.app.state, "website", None)
    if website is None:
        raise HTTPException(503, "Aucun site chargé")
    return website


def get_renderer(request: Request, website: Website = Depends(get_website)) -> HtmlRenderer:
    renderer = getattr(request.app.state, "renderer", None)
    if renderer is None or renderer.website is not website:
        renderer = install_website(request.app, website)
    return renderer


def render_route(website: Website, renderer: HtmlRenderer, route: str, locale: Optional[str] = None) -> HTMLResponse:
    """Active la page de `route` et la rend. Route inconnue → 404."""
    try:
        page = website.set_active_page(route)
    except PageNotFound as e:
        log.info("404 %s", e.route)
        return HTMLResponse(f"<p style='font-family:sans-serif;padding:40px'>Page introuvable : {html.escape(e.route)}</p>", status_code=404)
    if locale:
        website.set_active_locale(locale)
    return HTMLResponse(renderer.render_page(page))


@router.get("/pages", summary="Hiérarchie des pages")
def pages(website: Website = Depends(get_website)) -> dict:
    return {"pages": website.get_page_hierarchy(), "active": website.active_page.route}


@router.get("/locales", summary="Locales du site")
def locales(website: Website = Depends(get_website)) -> dict:
    return {"locales": website.get_locales(), "active": website.get_active_locale()}


@router.get("/blocks", summary="Infos des blocs rendus d'une page")
def blocks(route: str = "/", website: Website = Depends(get_website)) -> dict:
    try:
        page = website.get_page(route)
    except PageNotFound as e:
        raise HTTPException(404, str(e))

    items = []
    for index, block in enumerate(page.get_page_blocks()):
        info = block.get_block_info()
        items.append({
            "id":       block.id,
            "index":    index,
            "type":     info["type"],
            "theme":    info["theme"],
            "state":    info["state"],
            "context":  dict(info["context"]),
            "fallback": block.is_fallback,
            "children": [child.id for child in block.child_blocks],
        })
    return {"route": page.route, "blocks": items}


@router.get("/render", response_class=HTMLResponse, summary="Rend une page en HTML")
async def render(
    route: str = "/",
    locale: Optional[str] = None,
    website: Website = Depends(get_website),
    renderer: HtmlRenderer = Depends(get_renderer),
) -> HTMLResponse:
    return render_route(website, renderer, route, locale)


@router.post("/reload", summary="Recharge les données du site")
def reload(request: Request) -> dict:
    settings: Optional[Settings] = getattr(request.app.state, "settings", None)
    if settings is None or not settings.site_data_path:
        raise HTTPException(409, "SITE_DATA_PATH non configuré")
    current = getattr(request.app.state, "website", None)
    try:
        website = load_website(
            settings.site_data_path,
            registry=current.registry if current is not None else None,
            settings=settings,
        )
    except StructuralError as e:
        log.warning("Rechargement refusé : %s", e)
        raise HTTPException(422, str(e))
    install_website(request.app, website)
    return {"ok": True, "pages": len(website.pages)}
