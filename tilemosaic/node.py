"""The binary tree of tiles that makes up a mosaic layout."""

from __future__ import annotations

from dataclasses import dataclass

from tilemosaic.bounding_box import BoundingBox
from tilemosaic.branch import MosaicBranch, MosaicBranchIndex, MosaicDirection
from tilemosaic.components import mosaic_split, mosaic_tile

_MIN_SPLIT = 20.0
_MAX_SPLIT = 80.0
_DEFAULT_SPLIT = 50.0


@dataclass
class MosaicNode:
    """A leaf holding rendered content, or a parent dividing its area between two children."""

    element: str | None = None
    first: MosaicNode | None = None
    second: MosaicNode | None = None
    direction: MosaicDirection | None = None
    split_percentage: float | None = None

    def __post_init__(self) -> None:
        if (self.element is None) == (self.first is None):
            raise ValueError("a node holds either an element or a first child, not both or neither")
        if self.first is not None and (self.direction is None or self.split_percentage is None):
            raise ValueError("a parent node needs a direction and a split percentage")

    @classmethod
    def new_root(cls, element: str) -> MosaicNode:
        """Create a tree consisting of a single tile."""
        return cls(element=element)

    def is_parent(self) -> bool:
        """Tell whether this node divides its area between children."""
        return self.first is not None

    def add_child_in_order(self, direction: MosaicDirection, element: str) -> None:
        """Add a tile after the last one, following the chain of second children."""
        node = self
        while True:
            if not node.is_parent():
                node.first = MosaicNode(element=node.element)
                node.second = MosaicNode(element=element)
                node.element = None
                node.direction = direction
                node.split_percentage = _DEFAULT_SPLIT
                return
            if node.second is None:
                node.second = MosaicNode(element=element)
                return
            node = node.second

    def render(self, bounding_box: BoundingBox, path: MosaicBranch) -> list[str]:
        """Render this subtree into tiles and split handles placed inside the given box."""
        if not self.is_parent():
            return [mosaic_tile(bounding_box, self.element)]

        split = bounding_box.split(self.split_percentage, self.direction)
        elements = self.first.render(split.first, path.concat(MosaicBranchIndex.FIRST))
        elements.append(
            mosaic_split(self.direction, bounding_box, self.split_percentage, path)
        )
        if self.second is not None:
            elements.extend(
                self.second.render(split.second, path.concat(MosaicBranchIndex.SECOND))
            )
        return elements

    def resize(self, path: MosaicBranch, cursor_pos: float, max_pos: float) -> bool:
        """Move the split of the node at ``path`` to follow the cursor.

        Returns False when the path leads to or through a leaf. Raises ValueError
        when the path descends into a missing second child.
        """
        node = self
        max_col = max_pos
        max_row = max_pos

        for step in path:
            if not node.is_parent():
                return False
            fraction = node.split_percentage / 100.0
            if node.direction is MosaicDirection.COLUMN:
                max_col -= max_col * fraction
            else:
                max_row -= max_row * fraction
            if step is MosaicBranchIndex.FIRST:
                node = node.first
            else:
                if node.second is None:
                    raise ValueError("path descends into a missing second child")
                node = node.second

        if not node.is_parent():
            return False

        if node.direction is MosaicDirection.COLUMN:
            cursor = cursor_pos - (max_pos - max_col)
            percentage = cursor / max_col * 100.0
        else:
            cursor = cursor_pos - (max_pos - max_row)
            percentage = cursor / max_row * 100.0

        if percentage > _MAX_SPLIT:
            percentage = _MAX_SPLIT
        elif percentage < _MIN_SPLIT:
            percentage = _MIN_SPLIT
        node.split_percentage = percentage
        return True