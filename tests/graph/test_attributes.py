"""Tests for attribute bags."""

import pytest

from flownet.graph.attributes import AttributeBagNamespaced, AttributeBagReference
from flownet.graph.errors import InvalidArgumentError


class TestAttributeBagReference:
    def test_shares_the_dict(self):
        store = {"a": 1}
        bag = AttributeBagReference(store)

        bag["b"] = 2
        store["c"] = 3

        assert store == {"a": 1, "b": 2, "c": 3}
        assert bag.get_attributes() == {"a": 1, "b": 2, "c": 3}
        assert len(bag) == 3

    def test_delete(self):
        store = {"a": 1}
        bag = AttributeBagReference(store)

        del bag["a"]

        assert store == {}

    def test_set_attributes(self):
        bag = AttributeBagReference({"a": 1})

        bag.set_attributes({"a": 2, "b": 3})

        assert bag.get_attributes() == {"a": 2, "b": 3}

    def test_get_attributes_is_a_snapshot(self):
        store = {"a": 1}
        bag = AttributeBagReference(store)

        snapshot = bag.get_attributes()
        snapshot["a"] = 99

        assert store["a"] == 1

    @pytest.mark.parametrize("name", [1, None, ("a",)])
    def test_name_must_be_string(self, name):
        bag = AttributeBagReference({})

        with pytest.raises(InvalidArgumentError):
            bag.set_attribute(name, "x")
        with pytest.raises(InvalidArgumentError):
            bag.get_attribute(name)


class TestAttributeBagNamespaced:
    def test_prefixes_keys(self):
        store = {}
        bag = AttributeBagNamespaced(AttributeBagReference(store), "flow.")

        bag.set_attribute("source", True)

        assert store == {"flow.source": True}
        assert bag.get_attribute("source") is True
        assert bag.prefix == "flow."

    def test_only_sees_own_keys(self):
        store = {"flow.a": 1, "flow.b": 2, "color": "red"}
        bag = AttributeBagNamespaced(AttributeBagReference(store), "flow.")

        assert sorted(bag) == ["a", "b"]
        assert len(bag) == 2
        assert bag.get_attributes() == {"a": 1, "b": 2}
        assert bag.get_attribute("color") is None

    def test_clear_keeps_other_keys(self):
        store = {"flow.a": 1, "color": "red"}
        bag = AttributeBagNamespaced(AttributeBagReference(store), "flow.")

        bag.clear()

        assert store == {"color": "red"}

    def test_on_edge_bag(self, directed):
        bag = AttributeBagNamespaced(directed.get_attribute_bag(), "layout.")

        bag["x"] = 10

        assert directed.get_attribute("layout.x") == 10
