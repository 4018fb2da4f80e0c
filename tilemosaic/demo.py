"""A sample page showing a mosaic of windows."""

from __future__ import annotations

import argparse
from pathlib import Path

from tilemosaic.branch import MosaicDirection
from tilemosaic.components import mosaic_window
from tilemosaic.mosaic import Mosaic
from tilemosaic.node import MosaicNode

_STYLE = """
.mosaic-tile { position: absolute; margin: 3px; background-color: black; }
.mosaic-split-line { }
.mosaic-split-row {
    position: absolute; z-index: 1; touch-action: none;
    margin-left: -3px; width: 6px; cursor: ew-resize;
}
.mosaic-split-col {
    position: absolute; z-index: 1; touch-action: none;
    margin-top: -3px; height: 6px; cursor: ns-resize;
}
.mosaic-window {
    width: 100%; height: 100%; border: 2px solid black; border-radius: 2px;
    margin: -2px; position: relative; display: flex; flex-direction: column;
    overflow: hidden;
}
.mosaic-window-toolbar {
    display: flex; justify-content: space-between; align-items: center;
    flex-shrink: 0; height: 30px; background: white;
}
.mosaic-window-body { width: 100%; height: 100% }
"""

_ROOT_WINDOW_STYLE = (
    "width: 100%; height: 100%; border: 2px solid black; border-radius: 2px; "
    "overflow: hidden; margin: -2px;"
)


def _pink_window() -> str:
    return '<div style="background-color: pink; width: 100%; height: 100%;"></div>'


def _red_window() -> str:
    return (
        '<div style="background-color: red; width: 100%; height: 100%;">'
        '<button style="width: 50px; height: 50px; z-index: 9999">0</button>'
        "</div>"
    )


def _buttons() -> str:
    return (
        '<button style="margin-left: 60px; width: 50px; height: 50px; '
        'position: absolute; z-index: 9999">col</button>'
        '<button style="width: 50px; height: 50px; position: absolute; '
        'z-index: 9999">row</button>'
    )


def build_page(column_splits: int = 0, row_splits: int = 0) -> str:
    """Build the sample page after adding the given numbers of column and row windows."""
    if column_splits < 0 or row_splits < 0:
        raise ValueError("split counts must not be negative")

    root = MosaicNode.new_root(mosaic_window("root", _red_window(), _ROOT_WINDOW_STYLE))
    mosaic = Mosaic(root)
    for _ in range(column_splits):
        mosaic.root_node.add_child_in_order(
            MosaicDirection.COLUMN, mosaic_window("hello", _red_window())
        )
    for _ in range(row_splits):
        mosaic.root_node.add_child_in_order(
            MosaicDirection.ROW, mosaic_window("hello", _pink_window())
        )

    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        f"<style>{_STYLE}</style></head><body>"
        f"{mosaic.render(_buttons())}"
        "</body></html>"
    )


def _count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: list[str] | None = None) -> int:
    """Write the sample page to a file or to standard output."""
    parser = argparse.ArgumentParser(description="Render a sample mosaic page.")
    parser.add_argument("--columns", type=_count, default=0, help="column windows to add")
    parser.add_argument("--rows", type=_count, default=0, help="row windows to add")
    parser.add_argument("-o", "--output", type=Path, help="file to write instead of stdout")
    args = parser.parse_args(argv)

    page = build_page(args.columns, args.rows)
    if args.output is None:
        print(page)
    else:
        args.output.write_text(page, encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())