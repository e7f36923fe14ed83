"""
Unit tests for the radial layout engine.
"""
import sys

import pytest

from sunburstchart.exceptions import LayoutError
from sunburstchart.model.layout import Arc, band, layout
from sunburstchart.model.tree import Node, normalize


def by_name(arcs):
    return {arc.name: arc for arc in arcs}


class TestConcreteScenario:
    """Two severity buckets on a single ring of radius 40."""

    def test_angles_and_bands(self, three_issues):
        arcs = layout(three_issues, max_levels=1, radius=40)

        assert [a.name for a in arcs] == ["High", "Medium"]
        high, medium = arcs
        assert high.start_angle == pytest.approx(0.0)
        assert high.end_angle == pytest.approx(120.0)
        assert medium.start_angle == pytest.approx(120.0)
        assert medium.end_angle == pytest.approx(360.0)
        assert (high.inner_radius, high.outer_radius) == (0.0, 40.0)
        assert (medium.inner_radius, medium.outer_radius) == (0.0, 40.0)

    def test_colors_and_values(self, three_issues):
        high, medium = layout(three_issues, max_levels=1, radius=40)

        assert high.color == "#e11d48"
        assert medium.color == "#f59e0b"
        assert (high.value, medium.value) == (1.0, 2.0)

    def test_root_emits_no_arc(self, three_issues):
        arcs = layout(three_issues, max_levels=1, radius=40)
        assert all(arc.level >= 1 for arc in arcs)
        assert "3 Issues" not in by_name(arcs)


class TestAngleConservation:
    """Children partition their parent's span, in input order."""

    def test_children_partition_parent(self, nested_tree):
        arcs = by_name(layout(nested_tree, max_levels=2, radius=100))

        a, a1, a2 = arcs["A"], arcs["a1"], arcs["a2"]
        assert a1.start_angle == pytest.approx(a.start_angle)
        assert a1.end_angle == pytest.approx(a2.start_angle)
        assert a2.end_angle == pytest.approx(a.end_angle)
        assert a1.span == pytest.approx(a.span * 1 / 4)
        assert a2.span == pytest.approx(a.span * 3 / 4)

    def test_top_level_covers_full_circle(self, nested_tree):
        arcs = layout(nested_tree, max_levels=2, radius=100)
        level_one = [a for a in arcs if a.level == 1]

        assert level_one[0].start_angle == 0.0
        assert level_one[-1].end_angle == pytest.approx(360.0)
        assert sum(a.span for a in level_one) == pytest.approx(360.0)

    def test_order_is_input_order_not_weight(self):
        tree = Node(name="r", children=(
            Node(name="small", value=1),
            Node(name="big", value=9),
            Node(name="mid", value=5),
        ))
        arcs = layout(tree, max_levels=1, radius=10)

        assert [a.name for a in arcs] == ["small", "big", "mid"]
        assert arcs[0].start_angle < arcs[1].start_angle < arcs[2].start_angle

    def test_equal_weights_split_equally(self):
        tree = Node(name="r", children=tuple(Node(name=str(i), value=2) for i in range(4)))
        arcs = layout(tree, max_levels=1, radius=10)

        assert [a.span for a in arcs] == pytest.approx([90.0] * 4)
        assert [a.start_angle for a in arcs] == pytest.approx([0.0, 90.0, 180.0, 270.0])

    def test_emission_is_depth_first(self, nested_tree):
        arcs = layout(nested_tree, max_levels=2, radius=100)
        assert [a.name for a in arcs] == ["A", "a1", "a2", "B", "b1"]


class TestZeroWeights:
    """Zero, negative and NaN weights get no visible width."""

    def test_zero_leaf_emits_no_arc(self, nested_tree):
        names = [a.name for a in layout(nested_tree, max_levels=2, radius=100)]
        assert "C" not in names

    @pytest.mark.parametrize("bad", [0, -4, float("nan"), None])
    def test_bad_weight_gets_no_span(self, bad):
        tree = Node(name="r", children=(
            Node(name="bad", value=bad),
            Node(name="good", value=1),
        ))
        arcs = layout(tree, max_levels=1, radius=10)

        assert [a.name for a in arcs] == ["good"]
        assert arcs[0].start_angle == 0.0
        assert arcs[0].end_angle == pytest.approx(360.0)

    def test_children_of_zero_parent_are_zero_width(self):
        tree = Node(name="r", children=(
            Node(name="zero", value=0, children=(Node(name="child", value=5),)),
            Node(name="other", value=1),
        ))
        arcs = by_name(layout(tree, max_levels=2, radius=10))

        assert "zero" not in arcs
        assert arcs["child"].span == 0.0
        assert not arcs["child"].is_visible
        assert arcs["other"].span == pytest.approx(360.0)

    def test_all_zero_siblings(self):
        tree = Node(name="r", children=(Node(name="x", value=0), Node(name="y", value=0)))
        assert layout(tree, max_levels=1, radius=10) == []


class TestBands:
    """Radius bands are contiguous and increase with depth."""

    def test_band_monotonicity(self):
        bands = [band(level, 4, radius=100.0) for level in range(1, 5)]

        for inner, outer in bands:
            assert inner < outer
        for (_, outer), (next_inner, _) in zip(bands, bands[1:]):
            assert outer == pytest.approx(next_inner)
        assert bands[0][0] == 0.0
        assert bands[-1][1] == pytest.approx(100.0)

    def test_band_with_hole(self):
        assert band(1, 2, radius=90.0, inner_radius=30.0) == pytest.approx((30.0, 60.0))
        assert band(2, 2, radius=90.0, inner_radius=30.0) == pytest.approx((60.0, 90.0))

    def test_arcs_use_level_band(self, nested_tree):
        arcs = by_name(layout(nested_tree, max_levels=2, radius=100, inner_radius=20))

        assert (arcs["A"].inner_radius, arcs["A"].outer_radius) == pytest.approx((20.0, 60.0))
        assert (arcs["a1"].inner_radius, arcs["a1"].outer_radius) == pytest.approx((60.0, 100.0))

    def test_root_has_no_band(self):
        with pytest.raises(LayoutError):
            band(0, 2, radius=10.0)


class TestEdgeCases:
    def test_single_child_inherits_span(self):
        tree = Node(name="r", children=(
            Node(name="only", children=(Node(name="leaf", value=3),)),
        ))
        arcs = by_name(layout(tree, max_levels=2, radius=10))

        assert arcs["only"].start_angle == 0.0
        assert arcs["only"].end_angle == pytest.approx(360.0)
        assert arcs["leaf"].start_angle == arcs["only"].start_angle
        assert arcs["leaf"].end_angle == arcs["only"].end_angle

    @pytest.mark.parametrize("max_levels", [0, -1, 1.5, True])
    def test_invalid_max_levels(self, three_issues, max_levels):
        with pytest.raises(LayoutError):
            layout(three_issues, max_levels=max_levels, radius=10)

    def test_hole_larger_than_chart(self, three_issues):
        with pytest.raises(LayoutError):
            layout(three_issues, max_levels=1, radius=10, inner_radius=11)

    def test_accepts_weighted_tree(self, nested_tree):
        assert layout(normalize(nested_tree), 2, 100) == layout(nested_tree, 2, 100)

    def test_lone_root(self):
        assert layout(Node(name="alone", value=5), max_levels=1, radius=10) == []


class TestPurity:
    def test_idempotent(self, nested_tree):
        first = layout(nested_tree, max_levels=2, radius=100)
        second = layout(nested_tree, max_levels=2, radius=100)

        assert first == second
        assert [(a.start_angle, a.end_angle, a.inner_radius, a.outer_radius) for a in first] == \
               [(a.start_angle, a.end_angle, a.inner_radius, a.outer_radius) for a in second]

    def test_input_unchanged(self, nested_tree):
        before = nested_tree.to_dict()
        layout(nested_tree, max_levels=2, radius=100)
        assert nested_tree.to_dict() == before

    def test_source_node_is_caller_node(self, three_issues):
        arcs = layout(three_issues, max_levels=1, radius=40)
        assert arcs[0].source_node is three_issues.children[0]
        assert arcs[1].source_node is three_issues.children[1]

    def test_reuse_with_different_levels(self, three_issues):
        one = layout(three_issues, max_levels=1, radius=40)
        two = layout(three_issues, max_levels=2, radius=40)

        assert [a.span for a in one] == [a.span for a in two]
        assert two[0].outer_radius == pytest.approx(20.0)


def test_arc_contains():
    arc = Arc(10, 20, 30, 60, "#000", (0,), "x", 1.0, 1)

    assert arc.contains(15, 45)
    assert arc.contains(10, 30)
    assert not arc.contains(20, 45)
    assert not arc.contains(15, 60)


def test_tree_deeper_than_recursion_limit():
    """A chain deeper than the interpreter's recursion limit still lays out."""
    depth = sys.getrecursionlimit() + 500
    node = Node(name="leaf", value=1)
    for index in range(depth - 1):
        node = Node(name=f"n{index}", children=(node,))
    root = Node(name="root", children=(node,))

    arcs = layout(root, max_levels=depth, radius=100)

    assert len(arcs) == depth
    assert [a.level for a in arcs[:3]] == [1, 2, 3]
    assert arcs[-1].name == "leaf"
    assert all(a.span == 360.0 for a in arcs)
