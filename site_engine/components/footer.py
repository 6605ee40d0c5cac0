"""Composant Footer — colonnes de liens + copyright."""
from pydantic import BaseModel

from ..core.schemas import main_content


class FooterParams(BaseModel):
    copyright: str = ""


DEFAULTS = FooterParams().model_dump()


def render_footer(payload: dict, use_state=None) -> str:
    params = FooterParams.model_validate(payload["params"])
    main   = main_content(payload["content"])

    links_html = "".join(
        f'<li><a href="{lnk.get("href", "#")}">{lnk.get("label", "")}</a></li>'
        for lnk in main.links
    )
    text_html = "".join(f"<p>{p}</p>" for p in main.paragraphs)
    copyright_html = f'\n  <div class="footer__bottom">{params.copyright}</div>' if params.copyright else ""

    return f"""<footer class="footer">
  <div class="footer__inner">{text_html}<ul class="footer__links">{links_html}</ul></div>{copyright_html}
</footer>"""
