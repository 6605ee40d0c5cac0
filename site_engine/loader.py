"""
Chargement des données de site (JSON déjà produit par le parser de contenu).
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .config import Settings
from .core.schemas import SiteData
from .errors import StructuralError
from .registry import ComponentRegistry
from .website import Website

log = logging.getLogger(__name__)


def load_site_data(path: Union[str, Path]) -> SiteData:
    """Lit et valide un fichier JSON de site. JSON invalide → StructuralError."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise StructuralError(f"JSON invalide dans {path} : {e}") from e
    try:
        data = SiteData.model_validate(raw)
    except ValidationError as e:
        raise StructuralError(f"Données de site mal formées dans {path} : {e}") from e
    log.info("Données de site chargées depuis %s — %d pages", path, len(data.pages))
    return data


def load_website(
    path: Union[str, Path],
    registry: Optional[ComponentRegistry] = None,
    settings: Optional[Settings] = None,
) -> Website:
    return Website(load_site_data(path), registry=registry, settings=settings)
