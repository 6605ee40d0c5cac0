"""
Protocol Renderer — interface pluggable pour les renderers (HTML, JSON…).
"""
from typing import List, Optional, Protocol, runtime_checkable

from ..block import Block
from ..page import Page


@runtime_checkable
class Renderer(Protocol):
    def render_page(self, page: Optional[Page] = None) -> str: ...
    def render_block(self, block: Block) -> str: ...
    def render_blocks(self, blocks: List[Block]) -> str: ...
