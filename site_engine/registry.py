"""
Registry des composants — table de correspondance nom de type → ComponentSpec.

Un ComponentSpec déclare :
  - render(payload, use_state) → HTML   (payload = {content, params, block})
  - declared_state   : état initial par instance (copié dans block.start_state)
  - declared_context : drapeaux immuables du type (block.context)
  - defaults         : params par défaut, fusionnés avec le frontmatter

Un nom inconnu n'est jamais une erreur : resolve() renvoie None et le bloc
bascule sur `registry.fallback`.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

RenderFn = Callable[..., str]
ChildRenderer = Callable[..., str]


class ComponentSpec(BaseModel):
    """Capacités d'un type de composant."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    render: RenderFn
    declared_state: Any = None
    declared_context: Dict[str, Any] = Field(default_factory=dict)
    defaults: Dict[str, Any] = Field(default_factory=dict)


def _render_unknown(payload: dict, use_state=None) -> str:
    block = payload["block"]
    return f"<!-- Composant non implémenté : {block.type} -->"


FALLBACK_COMPONENT = ComponentSpec(name="Fallback", render=_render_unknown)


class ComponentRegistry:
    """
    Registry des composants d'une fondation.

    Usage:
        >>> registry = ComponentRegistry()
        >>> @registry.register("Hero", context={"allowTranslucentTop": True})
        ... def hero(payload, use_state):
        ...     return "<div class='hero'></div>"
        >>> registry.resolve("Hero").declared_context
        {'allowTranslucentTop': True}
    """

    def __init__(self, fallback: Optional[ComponentSpec] = None):
        self._components: Dict[str, ComponentSpec] = {}
        self.fallback = fallback or FALLBACK_COMPONENT
        self.child_renderer: Optional[ChildRenderer] = None

    def register(
        self,
        name: str,
        render: Optional[RenderFn] = None,
        *,
        state: Any = None,
        context: Optional[Dict[str, Any]] = None,
        defaults: Optional[Dict[str, Any]] = None,
    ):
        """Enregistre un composant. Sans `render`, s'utilise comme décorateur."""
        def _add(fn: RenderFn) -> RenderFn:
            self._components[name] = ComponentSpec(
                name=name,
                render=fn,
                declared_state=state,
                declared_context=context or {},
                defaults=defaults or {},
            )
            log.debug("Composant %s enregistré", name)
            return fn

        if render is None:
            return _add
        _add(render)
        return self._components[name]

    def resolve(self, name: Optional[str]) -> Optional[ComponentSpec]:
        """Nom → ComponentSpec, ou None si inconnu."""
        if not name:
            return None
        return self._components.get(name)

    def names(self) -> List[str]:
        return list(self._components)

    def register_child_renderer(self, fn: ChildRenderer) -> None:
        """Délégué de rendu d'un sous-ensemble de child_blocks (fourni par l'hôte)."""
        self.child_renderer = fn

    def __contains__(self, name: str) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)


def default_registry() -> ComponentRegistry:
    """Registry préchargé avec les composants intégrés (NavBar, Hero, Section, Tabs, Footer)."""
    from .components import register_builtin_components

    registry = ComponentRegistry()
    register_builtin_components(registry)
    return registry
