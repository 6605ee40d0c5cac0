"""
Taxonomie d'erreurs du moteur.

Seules les erreurs structurelles (données de site mal formées) et les routes
introuvables sont levées. Les types de composants inconnus, les requêtes hors
bornes et les appels avant câblage dégradent localement (log + sentinelle).
"""


class SiteEngineError(Exception):
    """Classe de base des erreurs site_engine."""


class StructuralError(SiteEngineError, ValueError):
    """Données site/page/section mal formées, fatal à la construction."""


class PageNotFound(SiteEngineError, LookupError):
    """Aucune page ne correspond à la route demandée."""

    def __init__(self, route: str):
        super().__init__(f"Page introuvable : {route!r}")
        self.route = route
