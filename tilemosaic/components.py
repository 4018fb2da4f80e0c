"""HTML fragments for tiles, windows and split handles."""

from __future__ import annotations

from html import escape

from tilemosaic.bounding_box import BoundingBox, _format_number
from tilemosaic.branch import MosaicBranch, MosaicDirection


def mosaic_tile(bounding_box: BoundingBox, children: str) -> str:
    """Wrap content in an absolutely placed tile."""
    style = escape(bounding_box.as_style())
    return f'<div class="mosaic-tile" style="{style}">{children}</div>'


def mosaic_window(title: str, children: str, style: str | None = None) -> str:
    """Render a window with a toolbar holding the title and a body holding the content."""
    style_attr = escape(style or "")
    return (
        f'<div class="mosaic-window" style="{style_attr}">'
        f'<div class="mosaic-window-toolbar">{escape(title)}</div>'
        f'<div class="mosaic-window-body">{children}</div>'
        "</div>"
    )


def split_style(
    bounding_box: BoundingBox, direction: MosaicDirection, split_percentage: float
) -> str:
    """Return the CSS that places a split handle inside its parent box."""
    position = "top: " if direction is MosaicDirection.COLUMN else "left: "
    absolute = bounding_box.absolute_split_percentage(split_percentage, direction)
    return f"{bounding_box.as_style()}\n{position}{_format_number(absolute)}%;"


def mosaic_split(
    direction: MosaicDirection,
    bounding_box: BoundingBox,
    split_percentage: float,
    path: MosaicBranch,
) -> str:
    """Render the draggable handle between the two children of a parent node."""
    css_class = (
        "mosaic-split-col" if direction is MosaicDirection.COLUMN else "mosaic-split-row"
    )
    style = escape(split_style(bounding_box, direction, split_percentage))
    data_path = escape(",".join(step.value for step in path))
    return (
        f'<div class="{css_class}" style="{style}" draggable="true" '
        f'data-path="{data_path}">'
        '<div class="mosaic-split-line"></div>'
        "</div>"
    )