import pytest

from tilemosaic.bounding_box import BoundingBox, Split
from tilemosaic.branch import MosaicDirection

DIRECTIONS = [MosaicDirection.COLUMN, MosaicDirection.ROW]


def test_empty_is_all_zero():
    box = BoundingBox.empty()
    assert (box.top, box.right, box.bottom, box.left) == (0.0, 0.0, 0.0, 0.0)


def test_empty_style():
    assert BoundingBox.empty().as_style() == "inset: 0% 0% 0% 0%;"


def test_style_keeps_edge_order_and_fractions():
    box = BoundingBox(top=10.0, right=20.0, bottom=30.0, left=12.5)
    assert box.as_style() == "inset: 10% 20% 30% 12.5%;"


@pytest.mark.parametrize("direction", DIRECTIONS)
@pytest.mark.parametrize("relative", [0.0, 20.0, 50.0, 80.0, 100.0])
def test_absolute_equals_relative_on_full_box(direction, relative):
    assert BoundingBox.empty().absolute_split_percentage(relative, direction) == pytest.approx(relative)


def test_absolute_extremes_hit_box_edges():
    box = BoundingBox(top=20.0, right=10.0, bottom=30.0, left=40.0)
    assert box.absolute_split_percentage(0.0, MosaicDirection.COLUMN) == pytest.approx(box.top)
    assert box.absolute_split_percentage(100.0, MosaicDirection.COLUMN) == pytest.approx(100.0 - box.bottom)
    assert box.absolute_split_percentage(0.0, MosaicDirection.ROW) == pytest.approx(box.left)
    assert box.absolute_split_percentage(100.0, MosaicDirection.ROW) == pytest.approx(100.0 - box.right)


def test_absolute_is_monotonic_inside_box():
    box = BoundingBox(top=10.0, right=5.0, bottom=25.0, left=15.0)
    for direction in DIRECTIONS:
        values = [box.absolute_split_percentage(r, direction) for r in (10.0, 40.0, 70.0)]
        assert values == sorted(values)


def test_column_split_shares_horizontal_edges():
    box = BoundingBox(top=10.0, right=5.0, bottom=20.0, left=15.0)
    split = box.split(50.0, MosaicDirection.COLUMN)
    assert isinstance(split, Split)
    absolute = box.absolute_split_percentage(50.0, MosaicDirection.COLUMN)
    assert split.first == BoundingBox(box.top, box.right, 100.0 - absolute, box.left)
    assert split.second == BoundingBox(absolute, box.right, box.bottom, box.left)
    assert split.first.bottom + split.second.top == pytest.approx(100.0)


def test_row_split_shares_vertical_edges():
    box = BoundingBox(top=10.0, right=5.0, bottom=20.0, left=15.0)
    split = box.split(30.0, MosaicDirection.ROW)
    absolute = box.absolute_split_percentage(30.0, MosaicDirection.ROW)
    assert split.first == BoundingBox(box.top, 100.0 - absolute, box.bottom, box.left)
    assert split.second == BoundingBox(box.top, box.right, box.bottom, absolute)
    assert split.first.right + split.second.left == pytest.approx(100.0)


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_nested_split_stays_inside_parent(direction):
    outer = BoundingBox.empty().split(40.0, direction).second
    inner = outer.split(60.0, direction)
    for child in (inner.first, inner.second):
        assert child.top >= outer.top
        assert child.left >= outer.left
        assert child.bottom >= outer.bottom
        assert child.right >= outer.right


def test_boxes_are_immutable_values():
    box = BoundingBox(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(AttributeError):
        box.top = 5.0
    assert box == BoundingBox(1.0, 2.0, 3.0, 4.0)