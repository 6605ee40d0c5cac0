"""
Renderer HTML — génère le HTML complet de la page active d'un Website.

Chaque bloc est rendu par son composant résolu : render(payload, use_state).
Un HookHost par bloc fournit la primitive d'état ; il est conservé entre
rendus (la connexion bridge survit aux navigations) et indexé faiblement
(il ne prolonge jamais la vie d'une Page).
"""
import logging
from typing import List, Optional
from weakref import WeakKeyDictionary

from ..block import Block
from ..bridge import HookHost
from ..page import Page
from .css import generate_site_css

log = logging.getLogger(__name__)


class HtmlRenderer:
    """
    Usage:
        >>> renderer = HtmlRenderer(website)
        >>> html = renderer.render_page()
    """

    def __init__(self, website):
        self.website = website
        self._hosts: "WeakKeyDictionary[Block, HookHost]" = WeakKeyDictionary()
        website.registry.register_child_renderer(self.render_blocks)

    def host_for(self, block: Block) -> HookHost:
        host = self._hosts.get(block)
        if host is None:
            host = HookHost()
            self._hosts[block] = host
        return host

    # ── Blocs ────────────────────────────────────────────────────────────────

    def render_block(self, block: Block) -> str:
        """Rend un bloc. Une exception du composant est loguée et remplacée par un commentaire."""
        spec = block.component or block.init_component(self.website.registry)
        host = self.host_for(block)
        host.begin_render()
        try:
            inner = spec.render(block.get_payload(), host.use_state)
        except Exception:
            log.exception("Rendu du bloc %s (%s) en échec", block.id, block.type)
            inner = f"<!-- Erreur de rendu : {block.type} -->"

        return (f'<div id="{block.id}" class="block block--{block.theme_name}" data-type="{block.type}">\n'
                f"{inner}\n</div>")

    def render_blocks(self, blocks: List[Block]) -> str:
        return "\n".join(self.render_block(b) for b in blocks)

    # ── Page ─────────────────────────────────────────────────────────────────

    def render_page(self, page: Optional[Page] = None, extra_head: str = "", extra_body_end: str = "") -> str:
        """Document HTML complet (page active par défaut)."""
        website = self.website
        page = page or website.active_page
        css = generate_site_css(website.theme)
        title = website.localize(page.title)
        description = website.localize(page.description)

        header_blocks = page.get_header_blocks()
        footer_blocks = page.get_footer_blocks()
        left_blocks   = page.get_left_blocks()
        right_blocks  = page.get_right_blocks()

        header_html = f"<header>\n{self.render_blocks(header_blocks)}\n</header>" if header_blocks else ""
        footer_html = f"<footer>\n{self.render_blocks(footer_blocks)}\n</footer>" if footer_blocks else ""
        left_html   = f'<aside class="layout__left">\n{self.render_blocks(left_blocks)}\n</aside>' if left_blocks else ""
        right_html  = f'<aside class="layout__right">\n{self.render_blocks(right_blocks)}\n</aside>' if right_blocks else ""
        body_html   = self.render_blocks(page.get_body_blocks())

        return f"""<!DOCTYPE html>
<html lang="{website.active_locale}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  {f'<meta name="description" content="{description}">' if description else ''}
  <style>{css}</style>
  {extra_head}
</head>
<body>
{header_html}
<div class="layout">
{left_html}
<main class="layout__main">
{body_html}
</main>
{right_html}
</div>
{footer_html}
{extra_body_end}
</body>
</html>"""
