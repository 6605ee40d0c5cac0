"""
Page — unité routable : blocs ordonnés répartis en zones de layout.

Zones : header, body, footer, left, right. `body` est toujours présent (liste
éventuellement vide) ; les autres valent None si le site ne définit pas la
page spéciale correspondante.

Construction en deux phases : 1) construire tous les blocs, 2) câbler
récursivement `page` / `website` sur chaque bloc et ses descendants.
"""
import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional

from pydantic import ValidationError

from .block import DEFAULT_THEME, Block, BlockInfo
from .core.schemas import PageData, SectionData
from .errors import StructuralError

if TYPE_CHECKING:
    from .website import Website

log = logging.getLogger(__name__)

AREAS = ("header", "body", "footer", "left", "right")
SPECIAL_AREAS = ("header", "footer", "left", "right")


def _section_id(section: Any) -> Optional[str]:
    if isinstance(section, SectionData):
        return section.id
    if isinstance(section, dict):
        return section.get("id")
    return None


class Page:
    """Page runtime, propriétaire exclusive de ses blocs."""

    def __init__(
        self,
        page_data: Any,
        id: int,
        website: Optional["Website"] = None,
        special_page_blocks: Optional[Dict[str, List[Any]]] = None,
    ):
        # Référence arrière posée avant tout bloc
        self.website = website

        try:
            data = page_data if isinstance(page_data, PageData) else PageData.model_validate(page_data)
        except ValidationError as e:
            raise StructuralError(f"Page #{id} mal formée : {e}") from e

        self.id = id
        self.route = data.route
        self.title = data.title
        self.description = data.description
        self.layout = data.layout

        registry = website.registry if website is not None else None
        default_theme = website.settings.default_theme if website is not None else DEFAULT_THEME
        special_page_blocks = special_page_blocks or {}

        self.body: List[Block] = self._build_blocks("body", data.sections, registry, default_theme)
        self.header: Optional[List[Block]] = None
        self.footer: Optional[List[Block]] = None
        self.left: Optional[List[Block]] = None
        self.right: Optional[List[Block]] = None
        for area in SPECIAL_AREAS:
            sections = special_page_blocks.get(area)
            if sections is not None:
                setattr(self, area, self._build_blocks(area, sections, registry, default_theme))

        self._wire_references()
        log.debug("Page %s construite — %d blocs", self.route, len(self.get_page_blocks()))

    def __repr__(self) -> str:
        return f"<Page #{self.id} {self.route}>"

    def _build_blocks(self, area: str, sections: List[Any], registry, default_theme: str) -> List[Block]:
        prefix = f"{self.id}" if area == "body" else f"{self.id}-{area}"
        blocks = []
        for i, section in enumerate(sections):
            blocks.append(Block(section, _section_id(section) or f"{prefix}_{i}", registry, default_theme))
        return blocks

    def _wire_references(self) -> None:
        for block in self.iter_blocks():
            block.page = self
            block.website = self.website

    # ── Parcours ─────────────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self.website is not None and self.website.active_page is self

    def get_header_blocks(self) -> List[Block]:
        return list(self.header) if self.header is not None and self.layout.header else []

    def get_body_blocks(self) -> List[Block]:
        return list(self.body)

    def get_footer_blocks(self) -> List[Block]:
        return list(self.footer) if self.footer is not None and self.layout.footer else []

    def get_left_blocks(self) -> List[Block]:
        return list(self.left) if self.left is not None and self.layout.left else []

    def get_right_blocks(self) -> List[Block]:
        return list(self.right) if self.right is not None and self.layout.right else []

    def get_page_blocks(self) -> List[Block]:
        """Flux rendu : header (si souscrit) + body + footer (si souscrit). Hors left/right."""
        return self.get_header_blocks() + self.body + self.get_footer_blocks()

    def iter_blocks(self) -> Iterator[Block]:
        """Tous les blocs de toutes les zones, descendants compris (profondeur d'abord)."""
        for area in AREAS:
            for block in getattr(self, area) or []:
                yield block
                yield from block.iter_descendants()

    def find_block(self, block_id: str) -> Optional[Block]:
        for block in self.iter_blocks():
            if block.id == block_id:
                return block
        return None

    # ── Requêtes positionnelles ──────────────────────────────────────────────

    def get_block_index(self, block: Block) -> int:
        """Position (0-based) dans get_page_blocks(), -1 si absent. Parcours linéaire."""
        for i, candidate in enumerate(self.get_page_blocks()):
            if candidate is block:
                return i
        return -1

    def get_block_info(self, index: int) -> Optional[BlockInfo]:
        blocks = self.get_page_blocks()
        if 0 <= index < len(blocks):
            return blocks[index].get_block_info()
        return None

    def get_first_body_block_info(self) -> Optional[BlockInfo]:
        return self.body[0].get_block_info() if self.body else None

    # ── État ─────────────────────────────────────────────────────────────────

    def init_state(self) -> None:
        """Remet chaque bloc de l'arbre (toutes zones, tous niveaux) à son start_state."""
        for area in AREAS:
            for block in getattr(self, area) or []:
                block.init_state()
