"""Tests for the raw node view and tier interpolation."""

import math

import pytest

from conftest import node, prop
from sdtd_browser.config_data import MalformedDataError, PropertyObject, XmlObject


class CountingList(list):
    """List counting how many times it is iterated."""

    def __init__(self, *args):
        super().__init__(*args)
        self.scans = 0

    def __iter__(self):
        self.scans += 1
        return super().__iter__()


class TestAttributes:
    def test_attribute_and_name(self) -> None:
        obj = XmlObject(node({"name": "gunPistol", "count": "1"}))
        assert obj.name == "gunPistol"
        assert obj.attribute("count") == "1"
        assert obj.attribute("missing") is None

    def test_node_without_attributes(self) -> None:
        obj = XmlObject(node(None))
        assert obj.attributes == {}
        assert obj.name is None

    def test_children(self) -> None:
        obj = XmlObject(node({"name": "r"}, ingredient=[node({"name": "a"}), node({"name": "b"})]))
        assert [child.name for child in obj.children("ingredient")] == ["a", "b"]
        assert obj.children("missing") == []

    def test_children_skip_text_content(self) -> None:
        obj = XmlObject(node({"name": "r"}, ingredient=["some text", node({"name": "a"})]))
        assert [child.name for child in obj.children("ingredient")] == ["a"]


class TestFirstChildLookups:
    def test_first_child_by_name(self) -> None:
        obj = XmlObject(
            node(
                {"name": "root"},
                recipe=[node({"name": "pipe"}), node({"name": "gunPistol", "n": "1"}), node({"name": "gunPistol", "n": "2"})],
            )
        )
        child = obj.first_child_by_name("recipe", "gunPistol")
        assert child is not None
        assert child.attribute("n") == "1"

    def test_first_child_missing_tag_or_name(self) -> None:
        obj = XmlObject(node({"name": "root"}, recipe=[node({"name": "pipe"})]))
        assert obj.first_child_by_name("block", "pipe") is None
        assert obj.first_child_by_name("recipe", "gunPistol") is None

    def test_first_child_by_name_is_cached(self) -> None:
        """Consecutive lookups return the same object and scan children once."""
        children = CountingList([node({"name": "pipe"}), node({"name": "gunPistol"})])
        obj = XmlObject(node({"name": "root"}, recipe=children))

        first = obj.first_child_by_name("recipe", "gunPistol")
        second = obj.first_child_by_name("recipe", "gunPistol")

        assert first is second
        assert children.scans == 1

    def test_missing_child_lookup_is_cached(self) -> None:
        children = CountingList([node({"name": "pipe"})])
        obj = XmlObject(node({"name": "root"}, recipe=children))

        assert obj.first_child_by_name("recipe", "ghost") is None
        assert obj.first_child_by_name("recipe", "ghost") is None
        assert children.scans == 1

    def test_first_child_by_class(self) -> None:
        obj = XmlObject(
            node(
                {"name": "gun"},
                property=[prop("Action0", "not a class"), node({"class": "Action0"}, property=[prop("Delay", "1")])],
            )
        )
        action = obj.first_child_by_class("property", "Action0")
        assert action is not None
        assert action.first_child_by_name("property", "Delay").attribute("value") == "1"

    def test_name_and_class_caches_are_independent(self) -> None:
        obj = XmlObject(node({"name": "gun"}, property=[node({"class": "Action1"}), node({"name": "Action1"})]))
        by_class = obj.first_child_by_class("property", "Action1")
        by_name = obj.first_child_by_name("property", "Action1")
        assert by_class is not by_name
        assert by_class.attribute("class") == "Action1"
        assert by_name.name == "Action1"

    def test_children_without_attributes_are_skipped(self) -> None:
        obj = XmlObject(node({"name": "root"}, recipe=[{}, node({"name": "pipe"})]))
        assert obj.first_child_by_name("recipe", "pipe").name == "pipe"


class TestPropertyObject:
    def test_get_property(self) -> None:
        obj = PropertyObject(node({"name": "x"}, property=[prop("CustomIcon", "icon"), prop("Tags", "a, b,,c")]))
        assert obj.get_property("CustomIcon") == "icon"
        assert obj.custom_icon == "icon"
        assert obj.custom_icon_tint is None
        assert obj.get_property_list("Tags") == ["a", "b", "c"]
        assert obj.get_property_list("Missing") == []


class TestInterpolation:
    def test_boundaries(self) -> None:
        assert XmlObject.interpolate([10, 20], [1, 5], 1) == 10
        assert XmlObject.interpolate([10, 20], [1, 5], 5) == 20

    def test_midpoint(self) -> None:
        assert XmlObject.interpolate([10, 20], [1, 5], 3) == 15

    def test_extrapolates_outside_range(self) -> None:
        assert XmlObject.interpolate([10, 20], [1, 5], 7) == 25
        assert XmlObject.interpolate([10, 20], [1, 5], 0) == 7.5

    def test_interpolate_strings(self) -> None:
        assert XmlObject.interpolate_strings("10,20", "1,5", 3) == 15
        assert XmlObject.interpolate_strings(".1, .3", "1,3", 2) == pytest.approx(0.2)

    def test_single_value_range(self) -> None:
        assert XmlObject.interpolate_strings("4", "1,5", 3) == 4

    def test_degenerate_tier_range_raises(self) -> None:
        with pytest.raises(MalformedDataError):
            XmlObject.interpolate([10, 20], [3, 3], 4)
        assert XmlObject.interpolate([10, 20], [3, 3], 3) == 10

    @pytest.mark.parametrize("value", ["abc,20", "10,20,30", "", None])
    def test_malformed_range_raises(self, value) -> None:
        with pytest.raises(MalformedDataError):
            XmlObject.interpolate_strings(value, "1,5", 3)

    def test_nan_propagates(self) -> None:
        assert math.isnan(XmlObject.interpolate_strings("nan,20", "1,5", 1))
