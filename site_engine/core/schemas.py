"""
Schémas Pydantic des données de site (déjà parsées depuis markdown/YAML).
Structure récursive : SiteData → PageData → SectionData → SectionData (subsections)

Le contenu d'une section (`content`) n'est pas validé au-delà d'un dict :
il est produit par le parser de contenu, hors de ce module.
"""
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

AreaName = Literal["header", "footer", "left", "right"]


def normalize_route(route: str) -> str:
    """'about/' → '/about', '' → '/'."""
    route = "/" + route.strip().strip("/")
    return route


class SectionData(BaseModel):
    """Une section de contenu : type de composant + params + contenu + sous-sections."""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    type: Optional[str] = None
    theme: Optional[str] = None
    params: Dict[str, Any] = Field(default_factory=dict)
    content: Dict[str, Any] = Field(default_factory=dict)
    subsections: List["SectionData"] = Field(default_factory=list)

    @field_validator("subsections", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("params", "content", mode="before")
    @classmethod
    def _none_as_empty_dict(cls, v):
        return {} if v is None else v

    def component_type(self) -> Optional[str]:
        """type explicite, sinon frontmatter `component`, sinon frontmatter `type`."""
        return self.type or self.params.get("component") or self.params.get("type")


class PageLayout(BaseModel):
    """Zones de layout auxquelles la page souscrit."""
    header: bool = True
    footer: bool = True
    left: bool = True
    right: bool = True


class PageData(BaseModel):
    """Page routable."""
    route: str
    title: Union[str, Dict[str, str]] = ""
    description: Union[str, Dict[str, str]] = ""
    layout: PageLayout = Field(default_factory=PageLayout)
    sections: List[SectionData] = Field(default_factory=list)

    @field_validator("route")
    @classmethod
    def _normalize(cls, v: str) -> str:
        return normalize_route(v)

    @field_validator("sections", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v


class SpecialPageData(BaseModel):
    """Page spéciale (header, footer, left, right), partagée par toutes les pages."""
    title: str = ""
    sections: List[SectionData] = Field(default_factory=list)


class LocaleInfo(BaseModel):
    code: str
    label: str = ""
    default: bool = False


class SiteData(BaseModel):
    """
    Données complètes d'un site.

    Exemple minimal :
    {
      "pages": [{"route": "/", "title": "Accueil", "sections": [{"type": "Hero", ...}]}],
      "special_pages": {"header": {"sections": [{"type": "NavBar"}]}},
      "locales": [{"code": "fr", "label": "Français", "default": true}],
      "theme": {"color_system": {...}}
    }
    """
    pages: List[PageData]
    special_pages: Dict[AreaName, SpecialPageData] = Field(default_factory=dict)
    locales: List[LocaleInfo] = Field(default_factory=list)
    config: Dict[str, Any] = Field(default_factory=dict)
    theme: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("pages")
    @classmethod
    def _not_empty(cls, v: List[PageData]) -> List[PageData]:
        if not v:
            raise ValueError("un site doit contenir au moins une page")
        return v


# ── Lecture tolérante du contenu parsé ──────────────────────────────────────

class ContentMain(BaseModel):
    """Vue typée de content["main"] ; les clés inconnues sont conservées."""
    model_config = ConfigDict(extra="allow")

    title: str = ""
    subtitle: str = ""
    pretitle: str = ""
    paragraphs: List[str] = Field(default_factory=list)
    images: List[Dict[str, Any]] = Field(default_factory=list)
    links: List[Dict[str, Any]] = Field(default_factory=list)
    list: List[Any] = Field(default_factory=list)


def main_content(content: Dict[str, Any]) -> ContentMain:
    """content["main"] → ContentMain (vide si absent ou mal formé)."""
    main = (content or {}).get("main") or {}
    if not isinstance(main, dict):
        return ContentMain()
    try:
        return ContentMain.model_validate(main)
    except ValueError:
        return ContentMain()
