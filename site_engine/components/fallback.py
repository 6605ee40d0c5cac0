"""Composant de repli — type inconnu : contenu générique + marqueur HTML."""
from .section import render_section


def render_fallback(payload: dict, use_state=None) -> str:
    block = payload["block"]
    return f"<!-- Composant non implémenté : {block.type} -->\n" + render_section(payload, use_state)
