"""Composant NavBar — s'adapte au bloc suivant (translucide au-dessus d'un hero)."""
from typing import Literal

from pydantic import BaseModel

from ..core.schemas import main_content


class NavBarParams(BaseModel):
    position: Literal["sticky", "fixed", "relative"] = "sticky"
    style: Literal["transparent", "white", "primary"] = "white"
    logo_href: str = "/"


DEFAULTS = NavBarParams().model_dump()


def _links(block, main) -> list:
    """Liens du contenu, sinon premier niveau de la hiérarchie des pages."""
    if main.links:
        return [(lnk.get("href", "#"), lnk.get("label", ""), False) for lnk in main.links]
    website = block.website
    if website is None:
        return []
    active = website.active_page
    return [
        (website.make_href(node["route"]), website.localize(node["title"]),
         active is not None and active.route == node["route"])
        for node in website.get_page_hierarchy()
    ]


def render_navbar(payload: dict, use_state=None) -> str:
    block  = payload["block"]
    params = NavBarParams.model_validate(payload["params"])
    main   = main_content(payload["content"])

    classes = ["navbar", f"navbar--{params.position}", f"navbar--{params.style}"]
    next_info = block.get_next_block_info()
    if next_info and next_info["context"].get("allowTranslucentTop"):
        classes += ["navbar--translucent", f"navbar--over-{next_info['theme']}"]

    links_html = ""
    for href, label, current in _links(block, main):
        current_attr = ' aria-current="page"' if current else ""
        links_html += f'<li><a href="{href}" class="navbar__link"{current_attr}>{label}</a></li>'

    return f"""<nav class="{" ".join(classes)}">
  <div class="navbar__inner">
    <a href="{params.logo_href}" class="navbar__logo">{main.title}</a>
    <ul class="navbar__links">{links_html}</ul>
  </div>
</nav>"""
