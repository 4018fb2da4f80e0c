# tilemosaic

A small tiling window layout engine. A layout is a binary tree of
`MosaicNode` values. Each leaf holds a piece of HTML. Each parent splits its
area into two parts, as a column (top and bottom) or a row (left and right),
at a percentage that can be changed. The tree renders to absolutely
positioned HTML elements, with a split handle placed between each pair of
panes.

## Installation

```
pip install tilemosaic
```

## Building a layout

```python
from tilemosaic.branch import MosaicDirection
from tilemosaic.components import mosaic_window
from tilemosaic.mosaic import Mosaic
from tilemosaic.node import MosaicNode

root = MosaicNode.new_root(mosaic_window("root", "<p>first</p>", None))
root.add_child_in_order(MosaicDirection.COLUMN, mosaic_window("notes", "<p>second</p>", None))
root.add_child_in_order(MosaicDirection.ROW, mosaic_window("log", "<p>third</p>", None))

mosaic = Mosaic(root)
html = mosaic.render("")
```

`add_child_in_order` follows the second child down the tree. It splits the
last leaf it reaches, or fills an empty second slot if it finds one. Each new
split starts at 50%.

A `MosaicNode` holds either an `element` (a leaf) or a `first` child together
with a `direction` and a `split_percentage` (a parent). Any other combination
raises `ValueError`. `is_parent()` tells the two kinds apart.

`Mosaic` keeps its own deep copy of the tree in `root_node`. `render_root()`
returns a `mosaic-root` container holding the tiles and handles.
`render(children)` wraps that in a `mosaic` container, with `children` placed
before the tiles.

## HTML pieces

`tilemosaic.components` builds the fragments the tree renders into:

- `mosaic_tile(bounding_box, children)` is a `mosaic-tile` div placed with an
  `inset` style.
- `mosaic_window(title, children, style)` is a `mosaic-window` div. It holds a
  `mosaic-window-toolbar` with the escaped title and a `mosaic-window-body`
  with the content.
- `mosaic_split(direction, bounding_box, split_percentage, path)` is a
  `mosaic-split-col` or `mosaic-split-row` handle. Its `data-path` attribute
  holds the comma separated path to the parent node.
- `split_style(bounding_box, direction, split_percentage)` returns the CSS
  that places such a handle.

No stylesheet comes with these classes. Supply your own, or see the one used
by the demo page.

## Positions and splits

`BoundingBox` holds the insets of an area from the top, right, bottom and
left of the container, in percent. `BoundingBox.empty()` covers the whole
container. `as_style()` gives the CSS `inset` declaration for it.
`absolute_split_percentage(percentage, direction)` converts a split position
inside the box into a position in the container.
`split(percentage, direction)` divides the box into a `Split` with `first`
and `second` boxes.

## Resizing

`MosaicNode.resize(path, cursor_pos, max_pos)` moves the split of the node
reached by `path` so that it follows a cursor position. `path` is a
`MosaicBranch`, built with `MosaicBranch.empty()` and `concat`. The cursor
position is given in the same units as `max_pos`, the size of the window.
The new split is kept between 20% and 80%.

- It returns `False` if the path leads to a leaf, or passes through one.
- It raises `ValueError` if the path steps into a second child that is
  missing.

## Demo

```
tilemosaic-demo
```

This writes a complete HTML page with a sample layout to standard output.
It takes these options:

- `--columns N` adds N column windows.
- `--rows N` then adds N row windows.
- `-o FILE` writes the page to FILE instead of standard output.

`tilemosaic.demo.build_page(column_splits, row_splits)` builds the same page
from Python.

## What it does not do

The rendered HTML is static. It contains no script, so dragging a split
handle or pressing the demo's buttons in a browser changes nothing. To resize
or add panes, call `resize` or `add_child_in_order` from Python and render
again. There is no server and no live view.