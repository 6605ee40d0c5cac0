"""Tests Block — construction, résolution du composant, requêtes inter-blocs."""
import pytest

from site_engine import Block, BlockStatus, ComponentRegistry, StructuralError, Website


# ── Construction ─────────────────────────────────────────────────────────────

def test_subsections_become_child_blocks_with_derived_ids():
    block = Block({"type": "Section", "subsections": [{"type": "A"}, {"type": "B"}]}, "p0_3")
    assert len(block.child_blocks) == 2
    assert [c.id for c in block.child_blocks] == ["p0_3_0", "p0_3_1"]
    assert [c.type for c in block.child_blocks] == ["A", "B"]


def test_nested_child_ids_follow_position_path():
    block = Block({"subsections": [{"subsections": [{}, {}]}]}, "b")
    grandchildren = block.child_blocks[0].child_blocks
    assert [c.id for c in grandchildren] == ["b_0_0", "b_0_1"]
    assert [b.id for b in block.iter_descendants()] == ["b_0", "b_0_0", "b_0_1"]


def test_null_subsections_treated_as_empty():
    block = Block({"type": "Section", "subsections": None}, "b")
    assert block.child_blocks == []


def test_non_list_subsections_is_structural_error():
    with pytest.raises(StructuralError):
        Block({"type": "Section", "subsections": "oops"}, "b")


def test_type_and_theme_from_frontmatter(registry):
    block = Block({"params": {"component": "Hero", "theme": "dark", "min_height": "50vh"}}, "b", registry)
    assert block.type == "Hero"
    assert block.theme_name == "dark"
    # réservées retirées, défauts du composant fusionnés
    assert block.params == {"text_position": "center", "overlay": True, "min_height": "50vh"}


def test_default_theme_is_light():
    assert Block({"type": "Section"}, "b").theme_name == "light"


# ── init_component ───────────────────────────────────────────────────────────

def test_uninitialized_without_registry():
    block = Block({"type": "Hero"}, "b")
    assert block.status is BlockStatus.UNINITIALIZED
    assert block.component is None


def test_init_component_snapshots_context_and_start_state(registry):
    block = Block({"type": "Tabs"}, "b", registry)
    assert block.status is BlockStatus.READY
    assert block.start_state == {"active": 0}
    assert block.state == {"active": 0}
    assert block.state is not block.start_state
    assert dict(block.context) == {}


def test_context_is_read_only(registry):
    block = Block({"type": "Hero"}, "b", registry)
    assert block.context["allowTranslucentTop"] is True
    with pytest.raises(TypeError):
        block.context["allowTranslucentTop"] = False


def test_declared_state_not_shared_between_instances(registry):
    a = Block({"type": "Tabs"}, "a", registry)
    b = Block({"type": "Tabs"}, "b", registry)
    a.state["active"] = 3
    assert b.state == {"active": 0}
    assert registry.resolve("Tabs").declared_state == {"active": 0}


def test_unknown_type_degrades_to_fallback(registry, caplog):
    block = Block({"type": "Unknown"}, "b", registry)
    assert block.is_fallback
    assert block.component is registry.fallback
    assert block.type == "Unknown"
    assert block.status is BlockStatus.READY
    assert "Composant inconnu" in caplog.text


def test_missing_type_degrades_to_fallback():
    registry = ComponentRegistry()
    block = Block({}, "b", registry)
    assert block.is_fallback
    assert block.type is None


# ── Requêtes inter-blocs ─────────────────────────────────────────────────────

def test_get_index_unwired_returns_minus_one():
    block = Block({"type": "Section"}, "b")
    assert block.get_index() == -1
    assert block.get_next_block_info() is None
    assert block.get_prev_block_info() is None


def test_get_block_info_snapshot(registry):
    block = Block({"type": "Hero", "theme": "dark"}, "b", registry)
    info = block.get_block_info()
    assert set(info) == {"type", "theme", "state", "context"}
    assert info["type"] == "Hero"
    assert info["theme"] == "dark"
    assert info["state"] is None


def test_navbar_sees_next_hero_info(registry, settings):
    website = Website({"pages": [{"route": "/", "sections": [
        {"type": "NavBar"},
        {"type": "Hero", "theme": "dark"},
    ]}]}, registry=registry, settings=settings)
    navbar, hero = website.active_page.body

    assert navbar.get_next_block_info() == {
        "type": "Hero",
        "theme": "dark",
        "context": {"allowTranslucentTop": True},
        "state": None,
    }
    assert hero.get_prev_block_info()["type"] == "NavBar"
    assert hero.get_next_block_info() is None
    assert navbar.get_prev_block_info() is None


def test_child_block_renderer_requires_wiring(registry):
    block = Block({"type": "Section"}, "b", registry)
    assert block.get_child_block_renderer() is None


def test_payload_shape(registry):
    block = Block({"type": "Section", "content": {"main": {"title": "T"}}}, "b", registry)
    payload = block.get_payload()
    assert payload["content"] == {"main": {"title": "T"}}
    assert payload["params"] == {}
    assert payload["block"] is block
