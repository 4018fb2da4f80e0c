"""Percentage-based boxes describing where a tile sits in the mosaic."""

from __future__ import annotations

from dataclasses import dataclass

from tilemosaic.branch import MosaicDirection


def _format_number(value: float) -> str:
    """Render a number the way CSS expects: no trailing '.0' on whole values."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class BoundingBox:
    """Insets from each edge of the container, in percent."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def empty(cls) -> BoundingBox:
        """Return a box covering the whole container."""
        return cls(0.0, 0.0, 0.0, 0.0)

    def as_style(self) -> str:
        """Return the CSS inset declaration for this box."""
        parts = " ".join(
            f"{_format_number(v)}%" for v in (self.top, self.right, self.bottom, self.left)
        )
        return f"inset: {parts};"

    def absolute_split_percentage(
        self, relative_split_percentage: float, direction: MosaicDirection
    ) -> float:
        """Convert a split position relative to this box into one relative to the container."""
        if direction is MosaicDirection.COLUMN:
            height = 100.0 - self.top - self.bottom
            return (height * relative_split_percentage) / 100.0 + self.top
        width = 100.0 - self.right - self.left
        return (width * relative_split_percentage) / 100.0 + self.left

    def split(
        self, relative_split_percentage: float, direction: MosaicDirection
    ) -> Split:
        """Divide this box in two at the given relative position."""
        absolute = self.absolute_split_percentage(relative_split_percentage, direction)
        if direction is MosaicDirection.COLUMN:
            return Split(
                first=BoundingBox(self.top, self.right, 100.0 - absolute, self.left),
                second=BoundingBox(absolute, self.right, self.bottom, self.left),
            )
        return Split(
            first=BoundingBox(self.top, 100.0 - absolute, self.bottom, self.left),
            second=BoundingBox(self.top, self.right, self.bottom, absolute),
        )


@dataclass(frozen=True)
class Split:
    """The two boxes produced by splitting one box."""

    first: BoundingBox
    second: BoundingBox