"""The top-level mosaic holding a tree of tiles and rendering it."""

from __future__ import annotations

import copy

from tilemosaic.bounding_box import BoundingBox
from tilemosaic.branch import MosaicBranch
from tilemosaic.node import MosaicNode


class Mosaic:
    """Owns its own copy of a layout tree and renders it as HTML."""

    def __init__(self, root: MosaicNode) -> None:
        self.root_node = copy.deepcopy(root)

    def render_root(self) -> str:
        """Render the tree as a container of absolutely placed tiles and split handles."""
        parts = self.root_node.render(BoundingBox.empty(), MosaicBranch.empty())
        return f'<div class="mosaic-root">{"".join(parts)}</div>'

    def render(self, children: str = "") -> str:
        """Render the whole mosaic, with extra content placed before the tiles."""
        return f'<div class="mosaic">{children}{self.render_root()}</div>'