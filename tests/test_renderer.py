"""Tests renderer HTML — document, composants intégrés, repli, isolation des erreurs."""
import gc

from site_engine import HtmlRenderer, Website, default_registry, load_website
from site_engine.renderer.css import generate_block_themes, generate_css_variables


# ── Document ─────────────────────────────────────────────────────────────────

def test_render_page_document(website):
    html = HtmlRenderer(website).render_page()
    assert html.startswith("<!DOCTYPE html>")
    assert '<html lang="fr">' in html
    assert "<title>Accueil</title>" in html
    assert "<header>" in html and "<footer>" in html
    assert 'class="layout__left"' in html
    assert "layout__right" not in html
    assert "--color-primary" in html


def test_render_regions_follow_layout(website):
    renderer = HtmlRenderer(website)
    html = renderer.render_page(website.get_page("/about"))
    assert "<footer>" not in html
    assert "Équipe" in html


def test_block_wrapper_carries_theme_and_type(website):
    html = HtmlRenderer(website).render_page()
    hero = website.active_page.body[0]
    assert f'<div id="{hero.id}" class="block block--dark" data-type="Hero">' in html


def test_css_variables_from_theme():
    css = generate_css_variables({"color_system": {
        "primary": {"base": "rgb(220, 38, 38)", "light": "rgb(248, 113, 113)"},
        "Accent Warm": {"base": "#f59e0b"},
    }})
    assert "--color-primary: rgb(220, 38, 38);" in css
    assert "--color-primary-rgb: 220, 38, 38;" in css
    assert "--color-primary-light: rgb(248, 113, 113);" in css
    assert "--color-accent-warm: #f59e0b;" in css
    assert "--color-accent-warm-rgb" not in css
    assert "--color-secondary: rgb(118, 75, 162);" in css


def test_css_variables_defaults():
    css = generate_css_variables({})
    assert css.startswith(":root {")
    assert "--color-primary: rgb(102, 126, 234);" in css
    assert "--font-family-body: 'Inter', sans-serif;" in css


def test_block_theme_rules():
    css = generate_block_themes({"block_themes": {"brand": {"bg": "#111", "text": "#eee"}}})
    assert ".block--brand{background:#111;color:#eee}" in css
    assert ".block--dark{background:rgb(18, 18, 28);color:rgb(240, 240, 245)}" in css
    assert ".block--light{" in css


# ── Composants intégrés ──────────────────────────────────────────────────────

def test_navbar_translucent_over_hero(website):
    html = HtmlRenderer(website).render_page()
    assert "navbar--translucent" in html
    assert "navbar--over-dark" in html


def test_navbar_opaque_over_section(website):
    html = HtmlRenderer(website).render_page(website.get_page("/about"))
    assert "navbar--translucent" not in html
    assert "navbar--white" in html


def test_navbar_links_from_page_hierarchy(website):
    html = HtmlRenderer(website).render_page()
    assert '<a href="/" class="navbar__link" aria-current="page">Accueil</a>' in html
    assert '<a href="/about" class="navbar__link">À propos</a>' in html


def test_footer_copyright(website):
    html = HtmlRenderer(website).render_page()
    assert "© ACME" in html


def test_tabs_state_persists_and_resets_on_reentry(demo_path, settings):
    website = load_website(demo_path, settings=settings)
    renderer = HtmlRenderer(website)
    website.set_active_page("/docs")
    tabs = website.active_page.body[0]

    html = renderer.render_page()
    assert "pip install site-engine" in html
    assert "Website(site_data)" not in html

    host = renderer.host_for(tabs)
    host.begin_render()
    _, set_state = tabs.use_block_state(host.use_state)
    set_state({"active": 1})

    html = renderer.render_page()
    assert "Website(site_data)" in html
    assert "pip install site-engine" not in html

    website.set_active_page("/")
    website.set_active_page("/docs")
    assert website.active_page.body[0] is tabs
    assert "pip install site-engine" in renderer.render_page()


def test_tabs_out_of_range_state_falls_back_to_first(demo_path, settings):
    website = load_website(demo_path, settings=settings)
    renderer = HtmlRenderer(website)
    tabs = website.get_page("/docs").body[0]
    tabs.state = {"active": 9}
    html = renderer.render_block(tabs)
    assert "pip install site-engine" in html


# ── Repli et isolation ───────────────────────────────────────────────────────

def test_unknown_type_renders_fallback_and_siblings(registry, settings):
    website = Website({"pages": [{"route": "/", "sections": [
        {"type": "Unknown", "content": {"main": {"title": "Contenu conservé"}}},
        {"type": "Section", "content": {"main": {"title": "Voisin"}}},
    ]}]}, registry=registry, settings=settings)
    html = HtmlRenderer(website).render_page()
    assert "<!-- Composant non implémenté : Unknown -->" in html
    assert "Contenu conservé" in html
    assert "Voisin" in html


def test_failing_component_does_not_break_page(settings):
    registry = default_registry()

    @registry.register("Boom")
    def boom(payload, use_state):
        raise RuntimeError("kaboom")

    website = Website({"pages": [{"route": "/", "sections": [
        {"type": "Boom"},
        {"type": "Section", "content": {"main": {"title": "Survivant"}}},
    ]}]}, registry=registry, settings=settings)
    html = HtmlRenderer(website).render_page()
    assert "<!-- Erreur de rendu : Boom -->" in html
    assert "Survivant" in html


def test_renderer_registers_child_renderer(website):
    renderer = HtmlRenderer(website)
    assert website.registry.child_renderer == renderer.render_blocks
    assert website.active_page.body[0].get_child_block_renderer() == renderer.render_blocks


def test_section_renders_children(registry, settings):
    website = Website({"pages": [{"route": "/", "sections": [
        {"type": "Section", "subsections": [
            {"type": "Section", "content": {"main": {"title": "Enfant A"}}},
            {"type": "Section", "content": {"main": {"title": "Enfant B"}}},
        ]},
    ]}]}, registry=registry, settings=settings)
    html = HtmlRenderer(website).render_page()
    assert "section__children" in html
    assert "Enfant A" in html and "Enfant B" in html


def test_hosts_do_not_keep_pages_alive(registry, settings):
    website = Website({"pages": [{"route": "/", "sections": [{"type": "Tabs"}]}]},
                      registry=registry, settings=settings)
    renderer = HtmlRenderer(website)
    renderer.render_page()
    assert len(renderer._hosts) == 1

    website.pages.clear()
    website.active_page = None
    gc.collect()
    assert len(renderer._hosts) == 0


def test_html_renderer_satisfies_renderer_protocol(website):
    from site_engine.renderer import Renderer

    assert isinstance(HtmlRenderer(website), Renderer)
