"""Composant Hero — plein écran, autorise une navbar translucide au-dessus de lui."""
from typing import Literal

from pydantic import BaseModel

from ..core.schemas import main_content

CONTEXT = {"allowTranslucentTop": True}


class HeroParams(BaseModel):
    text_position: Literal["center", "left", "right"] = "center"
    overlay: bool = True
    min_height: str = "90vh"


DEFAULTS = HeroParams().model_dump()


def render_hero(payload: dict, use_state=None) -> str:
    params = HeroParams.model_validate(payload["params"])
    main   = main_content(payload["content"])

    classes = ["hero", f"hero--text-{params.text_position}"]
    inline_styles = [f"min-height:{params.min_height}"]
    if main.images:
        inline_styles.append(f"background-image:url('{main.images[0].get('src', '')}')")
        if params.overlay:
            classes.append("hero--overlay")

    badge_html = f'<span class="hero__badge">{main.pretitle}</span>\n    ' if main.pretitle else ""
    paragraphs = "".join(f'<p class="hero__subtitle">{p}</p>' for p in main.paragraphs)

    cta_group = ""
    if main.links:
        buttons = "".join(
            f'<a href="{lnk.get("href", "#")}" class="btn {"btn-primary" if i == 0 else "btn-secondary"}">{lnk.get("label", "")}</a>'
            for i, lnk in enumerate(main.links[:2])
        )
        cta_group = f'\n    <div class="hero__cta-group">{buttons}</div>'

    return f"""<div class="{" ".join(classes)}" style="{";".join(inline_styles)}">
  <div class="hero__content">
    {badge_html}<h1 class="hero__title">{main.title}</h1>
    {paragraphs}{cta_group}
  </div>
</div>"""
