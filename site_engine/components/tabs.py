"""
Composant Tabs — parent à état : un onglet actif parmi les blocs enfants.

L'état {"active": i} persiste entre rendus et navigations via use_block_state.
"""
from ..core.schemas import main_content

STATE = {"active": 0}


def render_tabs(payload: dict, use_state) -> str:
    block = payload["block"]
    state, _set_state = block.use_block_state(use_state)

    children = block.child_blocks
    if not children:
        return '<div class="tabs tabs--empty"></div>'

    active = (state or {}).get("active", 0)
    if not 0 <= active < len(children):
        active = 0

    labels = "".join(
        f'<button class="tabs__tab{" tabs__tab--active" if i == active else ""}" '
        f'data-tab="{i}" aria-selected="{"true" if i == active else "false"}">'
        f'{main_content(child.content).title or f"Tab {i + 1}"}</button>'
        for i, child in enumerate(children)
    )

    render_children = block.get_child_block_renderer()
    panel = render_children([children[active]]) if render_children is not None else ""

    return f"""<div class="tabs" data-block="{block.id}">
  <div class="tabs__list" role="tablist">{labels}</div>
  <div class="tabs__panel" role="tabpanel">{panel}</div>
</div>"""
