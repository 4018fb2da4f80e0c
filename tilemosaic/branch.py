"""Split directions and paths that address nodes inside a mosaic tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class MosaicDirection(Enum):
    """Axis along which a parent node divides its area."""

    COLUMN = "column"
    ROW = "row"


class MosaicBranchIndex(Enum):
    """Which child of a parent node a path step descends into."""

    FIRST = "first"
    SECOND = "second"


@dataclass(frozen=True)
class MosaicBranch:
    """An immutable path from the root of a mosaic tree to one of its nodes."""

    indices: tuple[MosaicBranchIndex, ...] = ()

    def __iter__(self) -> Iterator[MosaicBranchIndex]:
        return iter(self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    @classmethod
    def empty(cls) -> MosaicBranch:
        """Return the path that points at the root itself."""
        return cls()

    def concat(self, branch_index: MosaicBranchIndex) -> MosaicBranch:
        """Return a new path extended by one step; this path is left unchanged."""
        return MosaicBranch(self.indices + (branch_index,))