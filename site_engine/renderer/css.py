"""
Générateur CSS — variables :root et palettes de blocs depuis le thème du site.

theme = {
  "color_system": {"primary": {"base": ..., "light": ...}, "accent": {...}},
  "block_themes": {"dark": {"bg": ..., "text": ...}, "brand": {...}},
  "font_family_headings": "Inter", "font_family_body": "Inter",
}

Chaque rôle du color_system donne --color-{rôle} (nuance `base`) et
--color-{rôle}-{nuance} pour les autres. Chaque palette de block_themes donne
une règle .block--{nom}, le nom étant celui porté par Block.theme_name.
"""
import re
from typing import Dict

DEFAULT_COLOR_SYSTEM: Dict[str, Dict[str, str]] = {
    "primary":   {"base": "rgb(102, 126, 234)"},
    "secondary": {"base": "rgb(118, 75, 162)"},
}

DEFAULT_BLOCK_THEMES: Dict[str, Dict[str, str]] = {
    "light": {"bg": "rgb(255, 255, 255)", "text": "rgb(45, 55, 72)"},
    "dark":  {"bg": "rgb(18, 18, 28)",    "text": "rgb(240, 240, 245)"},
}

_RGB = re.compile(r"rgb\((\d+),\s*(\d+),\s*(\d+)\)")

_LAYOUT_CSS = """*,*::before,*::after{box-sizing:border-box}
body{margin:0;font-family:var(--font-family-body)}
h1,h2,h3{font-family:var(--font-family-headings)}
.layout{display:flex}.layout__main{flex:1}
.navbar--translucent{background:transparent;position:absolute;width:100%}
.tabs__tab--active{border-bottom:2px solid var(--color-primary)}"""


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9-]+", "-", str(name).lower()).strip("-")


def generate_css_variables(theme: dict) -> str:
    theme = theme or {}
    color_system = {**DEFAULT_COLOR_SYSTEM, **theme.get("color_system", {})}

    lines = []
    for role, shades in color_system.items():
        role = _slug(role)
        for shade, value in (shades or {}).items():
            name = f"--color-{role}" if shade == "base" else f"--color-{role}-{_slug(shade)}"
            lines.append(f"  {name}: {value};")
            # triplet nu pour rgba(var(--color-x-rgb), .5)
            m = _RGB.match(str(value)) if shade == "base" else None
            if m:
                lines.append(f"  --color-{role}-rgb: {', '.join(m.groups())};")

    fh = theme.get("font_family_headings", "Inter")
    fb = theme.get("font_family_body", fh)
    lines.append(f"  --font-family-headings: '{fh}', sans-serif;")
    lines.append(f"  --font-family-body: '{fb}', sans-serif;")
    return ":root {\n" + "\n".join(lines) + "\n}"


def generate_block_themes(theme: dict) -> str:
    """Une règle .block--{nom} par palette (light/dark par défaut, surchargeables)."""
    palettes = {**DEFAULT_BLOCK_THEMES, **(theme or {}).get("block_themes", {})}
    rules = []
    for name, palette in palettes.items():
        decls = []
        if palette.get("bg"):
            decls.append(f"background:{palette['bg']}")
        if palette.get("text"):
            decls.append(f"color:{palette['text']}")
        if decls:
            rules.append(f".block--{_slug(name)}{{{';'.join(decls)}}}")
    return "\n".join(rules)


def generate_site_css(theme: dict) -> str:
    """Variables :root + palettes de blocs + règles de base du layout."""
    return "\n".join([generate_css_variables(theme), generate_block_themes(theme), _LAYOUT_CSS])
