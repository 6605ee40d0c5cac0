"""
Configuration — lue depuis l'environnement (os.getenv).

SITE_ENGINE_DEFAULT_LOCALE  locale synthétisée si le site n'en déclare aucune
SITE_ENGINE_HOME_ROUTE      page active au chargement
SITE_ENGINE_DEFAULT_THEME   thème d'un bloc sans thème explicite
SITE_ENGINE_LOG_LEVEL       niveau de log (appliqué par create_site_app)
SITE_DATA_PATH              JSON du site chargé par create_site_app
"""
import os
from typing import Optional

from pydantic import BaseModel


class Settings(BaseModel):
    default_locale: str = "fr"
    home_route: str = "/"
    default_theme: str = "light"
    log_level: str = "INFO"
    site_data_path: Optional[str] = None


def get_settings() -> Settings:
    """Construit les Settings à partir de l'environnement courant."""
    return Settings(
        default_locale=os.getenv("SITE_ENGINE_DEFAULT_LOCALE", "fr"),
        home_route=os.getenv("SITE_ENGINE_HOME_ROUTE", "/"),
        default_theme=os.getenv("SITE_ENGINE_DEFAULT_THEME", "light"),
        log_level=os.getenv("SITE_ENGINE_LOG_LEVEL", "INFO").upper(),
        site_data_path=os.getenv("SITE_DATA_PATH") or None,
    )
