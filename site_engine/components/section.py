"""Composant Section — contenu générique (titre, paragraphes, images, liens, enfants)."""
from ..core.schemas import main_content


def render_main(content: dict) -> str:
    main = main_content(content)
    parts = []
    if main.pretitle:
        parts.append(f'<p class="section__pretitle">{main.pretitle}</p>')
    if main.title:
        parts.append(f'<h2 class="section__title">{main.title}</h2>')
    if main.subtitle:
        parts.append(f'<p class="section__subtitle">{main.subtitle}</p>')
    parts += [f"<p>{p}</p>" for p in main.paragraphs]
    parts += [f'<img src="{img.get("src", "")}" alt="{img.get("alt", "")}">' for img in main.images]
    if main.links:
        links = "".join(f'<a href="{lnk.get("href", "#")}" class="btn">{lnk.get("label", "")}</a>' for lnk in main.links)
        parts.append(f'<div class="section__links">{links}</div>')
    return "\n".join(parts)


def render_section(payload: dict, use_state=None) -> str:
    block = payload["block"]
    inner = render_main(payload["content"])

    children_html = ""
    render_children = block.get_child_block_renderer()
    if block.child_blocks and render_children is not None:
        children_html = f'\n<div class="section__children">{render_children(block.child_blocks)}</div>'

    return f'<div class="section__content">\n{inner}{children_html}\n</div>'
