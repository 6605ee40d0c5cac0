"""
Block — unité de rendu adressable : une section de contenu liée à un type de composant.

Cycle de vie (par instance, dans une Page) :
    UNINITIALIZED ──init_component()──▶ READY ──use_block_state()──▶ CONNECTED
    CONNECTED ──page.init_state()──▶ CONNECTED (state = start_state, même instance)

Les références `page` / `website` sont non-propriétaires et posées par la passe
de câblage de la Page, après construction de tout l'arbre.
"""
import copy
import logging
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional, Tuple, TypedDict

from pydantic import ValidationError

from .bridge import StateHook
from .core.schemas import SectionData
from .errors import StructuralError

if TYPE_CHECKING:
    from .page import Page
    from .registry import ChildRenderer, ComponentRegistry, ComponentSpec
    from .website import Website

log = logging.getLogger(__name__)

# Clés du frontmatter qui décrivent le bloc lui-même et ne sont pas des params
RESERVED_PARAM_KEYS = frozenset({"type", "component", "theme", "id"})

DEFAULT_THEME = "light"

_UNSET = object()


class BlockStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    CONNECTED = "connected"


class BlockInfo(TypedDict):
    """Instantané lu par les blocs voisins. Ne pas muter state/context."""
    type: Optional[str]
    theme: str
    state: Any
    context: Any


class Block:
    """
    Bloc runtime.

    Usage:
        >>> block = Block({"type": "Hero", "subsections": [{}, {}]}, "b0", registry)
        >>> [c.id for c in block.child_blocks]
        ['b0_0', 'b0_1']
    """

    def __init__(
        self,
        block_data: Any,
        id: str,
        registry: Optional["ComponentRegistry"] = None,
        default_theme: str = DEFAULT_THEME,
    ):
        try:
            data = block_data if isinstance(block_data, SectionData) else SectionData.model_validate(block_data)
        except ValidationError as e:
            raise StructuralError(f"Section {id!r} mal formée : {e}") from e

        self.id = id
        self.type: Optional[str] = data.component_type()
        self.theme_name: str = data.theme or data.params.get("theme") or default_theme
        self.content: Dict[str, Any] = data.content
        self.frontmatter: Dict[str, Any] = {
            k: v for k, v in data.params.items() if k not in RESERVED_PARAM_KEYS
        }
        self.params: Dict[str, Any] = dict(self.frontmatter)

        self.component: Optional["ComponentSpec"] = None
        self.is_fallback = False
        self.context: Any = MappingProxyType({})
        self.start_state: Any = None
        self.state: Any = None
        self.status = BlockStatus.UNINITIALIZED
        self._start_state_captured = False
        self._reset_trigger: Optional[Callable[[], None]] = None

        self.page: Optional["Page"] = None
        self.website: Optional["Website"] = None

        self.child_blocks: List["Block"] = [
            Block(sub, f"{id}_{i}", registry, default_theme)
            for i, sub in enumerate(data.subsections)
        ]

        if registry is not None:
            self.init_component(registry)

    def __repr__(self) -> str:
        return f"<Block {self.id} type={self.type!r} status={self.status.value}>"

    # ── Composant ────────────────────────────────────────────────────────────

    def init_component(self, registry: "ComponentRegistry") -> "ComponentSpec":
        """
        Résout le type auprès du registry, fige le context et capture start_state.
        Type inconnu → composant de repli (jamais d'exception).
        """
        spec = registry.resolve(self.type)
        if spec is None:
            log.warning("Composant inconnu %r (bloc %s) — rendu via %s",
                        self.type, self.id, registry.fallback.name)
            spec = registry.fallback
            self.is_fallback = True
        else:
            self.is_fallback = False

        self.component = spec
        self.context = MappingProxyType(dict(spec.declared_context))
        self.params = {**spec.defaults, **self.frontmatter}

        if spec.declared_state is not None:
            self.start_state = copy.deepcopy(spec.declared_state)
            self._start_state_captured = True
        self.state = copy.deepcopy(self.start_state)

        if self.status is BlockStatus.UNINITIALIZED:
            self.status = BlockStatus.READY
        return spec

    # ── Requêtes inter-blocs ─────────────────────────────────────────────────

    def get_index(self) -> int:
        """Position dans page.get_page_blocks(), -1 si non câblé ou hors flux."""
        if self.page is None:
            return -1
        return self.page.get_block_index(self)

    def get_block_info(self) -> BlockInfo:
        return {
            "type": self.type,
            "theme": self.theme_name,
            "state": self.state,
            "context": self.context,
        }

    def get_next_block_info(self) -> Optional[BlockInfo]:
        return self._neighbour_info(+1)

    def get_prev_block_info(self) -> Optional[BlockInfo]:
        return self._neighbour_info(-1)

    def _neighbour_info(self, offset: int) -> Optional[BlockInfo]:
        index = self.get_index()
        if index < 0:
            return None
        return self.page.get_block_info(index + offset)

    # ── Bridge ───────────────────────────────────────────────────────────────

    def use_block_state(self, state_hook: StateHook, initial_state: Any = _UNSET) -> Tuple[Any, Callable[[Any], None]]:
        """
        Connecte block.state à la primitive réactive de l'hôte.

        1. capture `initial_state` comme start_state si aucun n'a été déclaré
        2. obtient (value, set_value) de state_hook
        3. mémorise un déclencheur de reset pour page.init_state()
        4. renvoie (value, setter) : setter écrit la slot réactive ET block.state
        """
        if not self._start_state_captured and initial_state is not _UNSET:
            self.start_state = copy.deepcopy(initial_state)
            self.state = copy.deepcopy(initial_state)
            self._start_state_captured = True

        value, set_value = state_hook(self.state)

        def set_block_state(new_state: Any) -> None:
            if callable(new_state):
                new_state = new_state(self.state)
            set_value(new_state)
            self.state = new_state

        # init_state() a déjà recopié start_state dans self.state
        self._reset_trigger = lambda: set_value(self.state)
        if self.status is not BlockStatus.CONNECTED:
            log.debug("Bloc %s connecté", self.id)
        self.status = BlockStatus.CONNECTED
        return value, set_block_state

    def init_state(self) -> None:
        """Remet state à start_state (ce bloc et tous ses descendants)."""
        self.state = copy.deepcopy(self.start_state)
        if self._reset_trigger is not None:
            self._reset_trigger()
        for child in self.child_blocks:
            child.init_state()

    # ── Composition ──────────────────────────────────────────────────────────

    def get_child_block_renderer(self) -> Optional["ChildRenderer"]:
        """Délégué de rendu des enfants enregistré par l'hôte (None si non câblé)."""
        if self.website is None:
            return None
        return self.website.registry.child_renderer

    def iter_descendants(self) -> Iterator["Block"]:
        for child in self.child_blocks:
            yield child
            yield from child.iter_descendants()

    def get_payload(self) -> dict:
        """Payload canonique passé à render()."""
        return {"content": self.content, "params": self.params, "block": self}
