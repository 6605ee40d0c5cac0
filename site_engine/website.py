"""
Website — conteneur racine d'un site chargé.

Possède toutes les Pages (construites dans l'ordre des données), la page
active, la liste des locales et la config/le thème globaux. Reconstruit en
bloc à chaque chargement de données de site, jamais à la navigation.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .config import Settings, get_settings
from .core.i18n import localize as _localize
from .core.schemas import LocaleInfo, SiteData, normalize_route
from .errors import PageNotFound, StructuralError
from .page import Page, SPECIAL_AREAS
from .registry import ComponentRegistry, default_registry

log = logging.getLogger(__name__)


class Website:
    """
    Site runtime.

    Usage:
        >>> website = Website({"pages": [{"route": "/", "sections": [{"type": "Hero"}]}]})
        >>> website.active_page.route
        '/'
    """

    def __init__(
        self,
        site_data: Any,
        registry: Optional[ComponentRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        if site_data is None:
            raise StructuralError("Données de site absentes")
        try:
            data = site_data if isinstance(site_data, SiteData) else SiteData.model_validate(site_data)
        except ValidationError as e:
            raise StructuralError(f"Données de site mal formées : {e}") from e

        self.settings = settings or get_settings()
        self.registry = registry if registry is not None else default_registry()
        self.config: Dict[str, Any] = data.config
        self.theme: Dict[str, Any] = data.theme
        self.locales: List[LocaleInfo] = self._init_locales(data.locales)
        self.default_locale: str = next(loc.code for loc in self.locales if loc.default)
        self.active_locale: str = self.default_locale
        self.active_page: Optional[Page] = None

        special_page_blocks = {
            area: data.special_pages[area].sections
            for area in SPECIAL_AREAS
            if area in data.special_pages
        }
        self.pages: List[Page] = [
            Page(page_data, i, self, special_page_blocks)
            for i, page_data in enumerate(data.pages)
        ]

        home = normalize_route(self.settings.home_route)
        self.active_page = next((p for p in self.pages if p.route == home), self.pages[0])
        log.info("Site construit — %d pages, locales %s, page active %s",
                 len(self.pages), [loc.code for loc in self.locales], self.active_page.route)

    def _init_locales(self, locales: List[LocaleInfo]) -> List[LocaleInfo]:
        """Garantit une liste non vide avec exactement une locale par défaut."""
        if not locales:
            return [LocaleInfo(code=self.settings.default_locale, label=self.settings.default_locale, default=True)]

        defaults = [loc for loc in locales if loc.default]
        if len(defaults) > 1:
            log.warning("Plusieurs locales par défaut %s — %s retenue",
                        [loc.code for loc in defaults], defaults[0].code)
        chosen = defaults[0].code if defaults else locales[0].code
        return [loc.model_copy(update={"default": loc.code == chosen}) for loc in locales]

    # ── Pages ────────────────────────────────────────────────────────────────

    def get_page(self, route: str) -> Page:
        route = normalize_route(route)
        for page in self.pages:
            if page.route == route:
                return page
        raise PageNotFound(route)

    def set_active_page(self, route: str) -> Page:
        """
        Active la page de `route`. Une page différente de la page active est
        réinitialisée (init_state) avant le rendu. PageNotFound si aucune page
        ne correspond : la page active reste inchangée.
        """
        page = self.get_page(route)
        if page is not self.active_page:
            page.init_state()
            self.active_page = page
            log.info("Page active : %s", page.route)
        return page

    def get_page_hierarchy(self) -> List[dict]:
        """Arbre des routes pour les menus : [{route, title, children: [...]}]."""
        nodes: Dict[str, dict] = {
            page.route: {"route": page.route, "title": page.title, "children": []}
            for page in self.pages
        }
        roots: List[dict] = []
        for route, node in nodes.items():
            parent = self._parent_node(route, nodes)
            (parent["children"] if parent else roots).append(node)
        return roots

    @staticmethod
    def _parent_node(route: str, nodes: Dict[str, dict]) -> Optional[dict]:
        parts = route.strip("/").split("/")
        for depth in range(len(parts) - 1, 0, -1):
            candidate = "/" + "/".join(parts[:depth])
            if candidate in nodes:
                return nodes[candidate]
        return None

    # ── Locales ──────────────────────────────────────────────────────────────

    def get_locales(self) -> List[dict]:
        return [loc.model_dump() for loc in self.locales]

    def get_active_locale(self) -> dict:
        return next(loc.model_dump() for loc in self.locales if loc.code == self.active_locale)

    def set_active_locale(self, code: str) -> bool:
        """Change la locale active. Code inconnu → False, locale inchangée."""
        if not any(loc.code == code for loc in self.locales):
            log.warning("Locale inconnue %r — %s conservée", code, self.active_locale)
            return False
        self.active_locale = code
        return True

    def localize(self, value: Any, context: Optional[dict] = None) -> Any:
        return _localize(value, self.active_locale, self.default_locale, context)

    def make_href(self, route: str, locale: Optional[str] = None) -> str:
        """Préfixe la route par le code de locale si ce n'est pas la locale par défaut."""
        route = normalize_route(route)
        code = locale or self.active_locale
        if code == self.default_locale:
            return route
        return f"/{code}" if route == "/" else f"/{code}{route}"
