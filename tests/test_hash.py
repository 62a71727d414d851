"""
Tests for Hash.

These tests verify:
1. Keyed lookup, overwrite and insertion-ordered projections
2. append_child builds Collections and rejects other existing values
3. filter/map/find_one never mutate the source
4. to_collection flattens Collections and refuses nested Hashes
5. remove_child returns a Collection of removed values
6. clone(True) / clone(False) select the copy depth positionally
"""

import pytest

from commonlib import BREAK, REMOVE, Collection, Hash, PreconditionError


class Cloneable:

    def __init__(self, result):
        self.result = result

    def clone(self):
        return self.result


@pytest.fixture
def hash_():
    return Hash()


# =============================================================================
# LOOKUP TESTS
# =============================================================================

class TestLookup:
    """Test get/set and projections."""

    def test_get_children_is_backing_dict(self, hash_):
        hash_.add_child("a1", 1)
        children = hash_.get_children()
        assert children is hash_._children
        assert children["a1"] == 1

    def test_get_child(self, hash_):
        hash_.set_children({"a1": 1})
        assert hash_.get_child("a1") == 1

    def test_missing_key_returns_none(self, hash_):
        assert hash_.get_child("nope") is None

    def test_set_value(self, hash_):
        hash_.set_children({"a1": 1})
        hash_.set_value("a1", 2)
        hash_.set_value("a2", 3)
        assert hash_.get_child("a1") == 2
        assert hash_.get_child("a2") == 3

    def test_get_keys(self, hash_):
        hash_.add_child("a1", 1).add_child("a2", 1)
        keys = hash_.get_keys()
        assert isinstance(keys, Collection)
        assert keys.get_children() == ["a1", "a2"]

    def test_get_values(self, hash_):
        hash_.add_child("a1", 1).add_child("a2", 2)
        values = hash_.get_values()
        assert isinstance(values, Collection)
        assert values.get_children() == [1, 2]

    def test_get_count(self, hash_):
        assert hash_.get_count() == 0
        hash_.add_child("a1", 1).add_child("a2", 1)
        assert hash_.get_count() == 2

    def test_has_child_with_falsy_value(self, hash_):
        hash_.add_child("a1", "1").add_child("a3", False)
        assert hash_.has_child("a1")
        assert hash_.has_child("a3")
        assert not hash_.has_child("b")

    def test_has_child_with_func(self, hash_):
        hash_.add_child("a1", "1").add_child("a2", "2")
        assert hash_.has_child_with_func(lambda val, key: val == "1")
        assert hash_.has_child_with_func(lambda val, key: key == "a1")
        assert not hash_.has_child_with_func(lambda val, key: key == "a3")


# =============================================================================
# MUTATION TESTS
# =============================================================================

class TestMutation:
    """Test add/append/remove."""

    def test_add_child_chains(self, hash_):
        hash_.add_child("a1", "1").add_child("a2", 2)
        assert [hash_.get_child("a1"), hash_.get_child("a2")] == ["1", 2]

    def test_add_child_overwrites(self, hash_):
        hash_.add_child("a1", "1")
        hash_.add_child("a1", 2)
        assert hash_.get_child("a1") == 2
        assert hash_.get_count() == 1

    def test_add_children_merges(self, hash_):
        hash_.add_children({"a": 1, "b": "b"})
        hash_.add_children({"c": True})
        hash_.add_children(Hash.create({"d": 2}))
        assert hash_.get_children() == {"a": 1, "b": "b", "c": True, "d": 2}

    def test_add_children_later_wins(self, hash_):
        hash_.add_children({"a": 1}).add_children({"a": 2})
        assert hash_.get_child("a") == 2

    def test_add_children_rejects_non_mapping(self, hash_):
        with pytest.raises(PreconditionError):
            hash_.add_children([1, 2])

    def test_append_child_creates_collection(self, hash_):
        hash_.append_child("a1", "1")
        value = hash_.get_child("a1")
        assert isinstance(value, Collection)
        assert value.get_children() == ["1"]

    def test_append_child_appends(self, hash_):
        hash_.append_child("a1", "1")
        hash_.append_child("a1", "2")
        assert hash_.get_child("a1").get_children() == ["1", "2"]

    def test_append_child_on_non_collection_fails(self, hash_):
        hash_.add_child("a1", 1)
        with pytest.raises(PreconditionError, match="must be Collection"):
            hash_.append_child("a1", 2)

    def test_remove_child_by_key(self, hash_):
        hash_.add_child("a", {})
        result = hash_.remove_child("a")
        assert hash_.get_child("a") is None
        assert result.get_children() == [{}]

    def test_remove_child_by_predicate(self, hash_):
        hash_.add_child("a", {}).add_child("b", 1)
        result = hash_.remove_child(lambda val, key: val == 1)
        assert hash_.get_child("b") is None
        assert isinstance(result, Collection)
        assert result.get_children() == [1]

    def test_remove_missing_key(self, hash_):
        assert hash_.remove_child("none").get_count() == 0

    def test_remove_unhashable_key_matches_nothing(self, hash_):
        hash_.add_child("a", 1)

        result = hash_.remove_child(["a"])

        assert isinstance(result, Collection)
        assert result.get_count() == 0
        assert hash_.get_children() == {"a": 1}

    def test_remove_all_children(self, hash_):
        hash_.add_child("a", 1)
        hash_.remove_all_children()
        assert hash_.get_count() == 0


# =============================================================================
# TRAVERSAL TESTS
# =============================================================================

class TestForEach:
    """Test for_each."""

    def test_visits_in_insertion_order(self, hash_):
        total = []
        keys = []
        hash_.add_child("a", 1).add_child("b", 2)

        hash_.for_each(lambda val, key: (total.append(val), keys.append(key)))

        assert sum(total) == 3
        assert "".join(keys) == "ab"

    def test_break(self, hash_):
        seen = []
        hash_.add_child("a", 1).add_child("b", 2)

        def visit(val, key):
            seen.append(val)
            return BREAK

        hash_.for_each(visit)
        assert seen == [1]

    def test_context(self, hash_):
        t = {"0": 1, "1": 2}
        total = []
        hash_.add_child("0", 100).add_child("1", 200)

        hash_.for_each(lambda val, key, ctx: total.append(ctx[key]), t)

        assert sum(total) == 3

    def test_none_context_is_passed_through(self, hash_):
        received = []
        hash_.add_child("a", 1)

        hash_.for_each(lambda val, key, ctx: received.append(ctx), None)

        assert received == [None]

    def test_removal_during_iteration(self, hash_):
        hash_.add_children({"a": 1, "b": 2})
        hash_.for_each(lambda val, key: hash_.remove_child(key))
        assert hash_.get_count() == 0


class TestDerived:
    """Test filter/map/find_one."""

    def test_map(self, hash_):
        hash_.add_child("a1", 1).add_child("a2", 2)

        result = hash_.map(lambda val, key: (key, val * 2))

        assert result.get_children() == {"a1": 2, "a2": 4}
        assert hash_.get_children() == {"a1": 1, "a2": 2}

    def test_map_remove(self, hash_):
        hash_.add_child("a1", 1).add_child("a2", 2)

        result = hash_.map(lambda v, k: REMOVE if v == 2 else [k, v * 2])

        assert result.get_children() == {"a1": 2}
        assert hash_.get_children() == {"a1": 1, "a2": 2}

    def test_map_bad_result(self, hash_):
        hash_.add_child("a1", 1)
        with pytest.raises(PreconditionError):
            hash_.map(lambda v, k: v)

    def test_filter(self, hash_):
        child1, child2, child3 = {"a": 1}, {"a": 2}, {"a": 2}
        hash_.add_child("1", child1).add_child("2", child2).add_child("3", child3)

        result = hash_.filter(lambda val, key: val["a"] == 2)

        assert isinstance(result, Hash)
        assert result.get_children() == {"2": child2, "3": child3}
        assert hash_.get_children() == {"1": child1, "2": child2, "3": child3}

    def test_filter_with_source(self, hash_):
        hash_.add_child("1", {"a": 1}).add_child("2", {"a": 2})

        result = hash_.filter(lambda val, key, src: src[key]["a"] == 2, with_source=True)

        assert list(result.get_children()) == ["2"]

    def test_find_one(self, hash_):
        hash_.add_children({"a": 1, "b": 2, "c": 3})

        assert hash_.find_one(lambda value, key: value == 2) == ("b", 2)
        assert hash_.get_count() == 3

    def test_find_one_with_source(self, hash_):
        hash_.add_children({"a": 1, "b": 2, "c": 3})
        result = hash_.find_one(lambda value, key, src: src[key] == 2, with_source=True)
        assert result == ("b", 2)

    def test_find_one_no_match(self, hash_):
        hash_.add_child("a", 1)
        assert hash_.find_one(lambda value, key: value == 9) is None


# =============================================================================
# CONVERSION AND CLONE TESTS
# =============================================================================

class TestConversion:
    """Test to_collection and to_array."""

    def test_to_collection_flattens(self, hash_):
        hash_.add_child("1", Collection.create([1, 2]))
        hash_.add_child("2", True)

        result = hash_.to_collection()

        assert isinstance(result, Collection)
        assert result.get_children() == [1, 2, True]

    def test_to_collection_rejects_hash(self, hash_):
        hash_.add_child("1", Hash.create())
        with pytest.raises(PreconditionError):
            hash_.to_collection()

    def test_to_array(self, hash_):
        hash_.add_child("1", Collection.create([1, 2]))
        hash_.add_child("2", True)
        hash_.add_child("3", 3)

        assert hash_.to_array() == [Collection.create([1, 2]), True, 3]


class TestClone:
    """Test the clone family on a Hash."""

    def test_shallow_clone(self, hash_):
        nested = {"x": 1}
        hash_.add_child("a", 1).add_child("b", nested)

        cloned = hash_.clone()
        cloned.set_value("a", 2)

        assert hash_.get_child("a") == 1
        assert cloned.get_child("b") is nested

    def test_deep_clone(self, hash_):
        hash_.add_child("a", Cloneable("copied")).add_child("b", 1)

        cloned = hash_.clone(deep=True)

        assert cloned.get_children() == {"a": "copied", "b": 1}

    def test_clone_into(self, hash_):
        hash_.add_child("a", 1)
        target = Hash({"z": 0})

        result = hash_.clone(target)

        assert result is target
        assert target.get_children() == {"a": 1}
        assert target.get_children() is not hash_.get_children()

    def test_positional_true_is_deep_clone(self, hash_):
        element = Cloneable("copied")
        hash_.add_child("a", element)

        cloned = hash_.clone(True)

        assert type(cloned) is Hash
        assert cloned.get_children() == {"a": "copied"}

    def test_positional_false_is_shallow_clone(self, hash_):
        element = Cloneable("copied")
        hash_.add_child("a", element)

        cloned = hash_.clone(False)

        assert type(cloned) is Hash
        assert cloned.get_child("a") is element

    def test_clone_into_with_positional_deep(self, hash_):
        hash_.add_child("a", Cloneable("copied"))
        target = Hash({"z": 0})

        assert hash_.clone(target, True) is target
        assert target.get_children() == {"a": "copied"}
