"""Tests registry — enregistrement, résolution, repli, composants intégrés."""
from site_engine import FALLBACK_COMPONENT, Block, ComponentRegistry, ComponentSpec, default_registry


def test_register_as_decorator():
    registry = ComponentRegistry()

    @registry.register("Card", state={"flipped": False}, context={"compact": True}, defaults={"size": "md"})
    def card(payload, use_state):
        return "<div class='card'></div>"

    spec = registry.resolve("Card")
    assert isinstance(spec, ComponentSpec)
    assert spec.render is card
    assert spec.declared_state == {"flipped": False}
    assert spec.declared_context == {"compact": True}
    assert spec.defaults == {"size": "md"}
    assert "Card" in registry
    assert len(registry) == 1


def test_register_direct_returns_spec():
    registry = ComponentRegistry()
    spec = registry.register("Plain", lambda payload, use_state: "")
    assert spec is registry.resolve("Plain")
    assert spec.declared_state is None


def test_resolve_unknown_is_none():
    registry = ComponentRegistry()
    assert registry.resolve("Nope") is None
    assert registry.resolve(None) is None
    assert registry.resolve("") is None


def test_fallback_defaults():
    assert ComponentRegistry().fallback is FALLBACK_COMPONENT
    custom = ComponentSpec(name="Custom", render=lambda payload, use_state: "")
    assert ComponentRegistry(fallback=custom).fallback is custom


def test_default_fallback_renders_marker():
    block = Block({"type": "Ghost"}, "b", ComponentRegistry())
    html = FALLBACK_COMPONENT.render(block.get_payload())
    assert "Composant non implémenté : Ghost" in html


def test_default_registry_builtins():
    registry = default_registry()
    assert set(registry.names()) == {"NavBar", "Hero", "Section", "Tabs", "Footer"}
    assert registry.fallback.name == "Fallback"
    assert registry.resolve("Hero").declared_context == {"allowTranslucentTop": True}
    assert registry.resolve("Tabs").declared_state == {"active": 0}
    assert registry.resolve("NavBar").defaults["position"] == "sticky"


def test_default_registry_instances_are_independent():
    a, b = default_registry(), default_registry()
    a.register("Extra", lambda payload, use_state: "")
    assert "Extra" not in b


def test_child_renderer_registration():
    registry = ComponentRegistry()
    assert registry.child_renderer is None

    def render_children(blocks):
        return "".join(b.id for b in blocks)

    registry.register_child_renderer(render_children)
    assert registry.child_renderer is render_children
