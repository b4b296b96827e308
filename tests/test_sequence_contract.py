"""
Tests for the shared Sequence contract, run against every implementation.

Covers:
- Index bounds
- Insert/remove round trips
- Sort stability and idempotence
- Search and bulk operations
- Fail-fast and async iteration
"""

import random

import pytest

from ordseq import (
    IndexOutOfRangeError,
    InvalidCursorStateError,
    OrderingPolicy,
    Sequence,
    comparing,
    natural_order,
)
from tests.conftest import Person


class TestBounds:
    """Out-of-range indices always raise IndexOutOfRangeError."""

    @pytest.mark.parametrize("index", [-1, 0, 1])
    def test_empty_sequence(self, sequence_type, index):
        """Test every indexed operation on an empty sequence."""
        seq = sequence_type()
        with pytest.raises(IndexOutOfRangeError):
            seq.get(index)
        with pytest.raises(IndexOutOfRangeError):
            seq.remove_at(index)
        with pytest.raises(IndexOutOfRangeError):
            seq.set(index, "x")
        if index != 0:
            with pytest.raises(IndexOutOfRangeError):
                seq.insert_at(index, "x")
        assert seq.size() == 0

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_non_empty_sequence(self, sequence_type, index):
        """Test indices outside [0, size) on a populated sequence."""
        seq = sequence_type(["a", "b", "c"])
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            seq.get(index)
        assert exc_info.value.index == index
        assert exc_info.value.size == 3

        with pytest.raises(IndexOutOfRangeError):
            seq.remove_at(index)
        assert seq.to_list() == ["a", "b", "c"]

    def test_insert_at_size_is_valid(self, sequence_type):
        """Test insertion accepts the position just past the end."""
        seq = sequence_type(["a"])
        seq.insert_at(1, "b")
        with pytest.raises(IndexOutOfRangeError):
            seq.insert_at(3, "c")
        assert seq.to_list() == ["a", "b"]

    def test_is_an_index_error(self, sequence_type):
        """Test the error is catchable as a built-in IndexError."""
        with pytest.raises(IndexError):
            sequence_type().get(0)


class TestMutation:
    """Tests for positional consistency across inserts and removes."""

    @pytest.mark.parametrize("index", [0, 2, 5])
    def test_insert_then_remove_round_trip(self, sequence_type, index):
        """Test insert_at followed by remove_at restores the sequence."""
        seq = sequence_type(range(5))
        before = seq.to_list()

        seq.insert_at(index, "new")
        assert seq.get(index) == "new"
        assert seq.remove_at(index) == "new"
        assert seq.to_list() == before

    def test_matches_python_list(self, sequence_type):
        """Test a random operation mix against a plain list model."""
        rng = random.Random(1234)
        seq = sequence_type()
        model = []

        for step in range(500):
            action = rng.random()
            if action < 0.5 or not model:
                index = rng.randint(0, len(model))
                seq.insert_at(index, step)
                model.insert(index, step)
            elif action < 0.8:
                index = rng.randrange(len(model))
                assert seq.remove_at(index) == model.pop(index)
            else:
                index = rng.randrange(len(model))
                assert seq.set(index, -step) == model[index]
                model[index] = -step

        assert seq.to_list() == model
        assert [seq.get(i) for i in range(len(model))] == model

    def test_remove_first_value(self, sequence_type):
        """Test removing the first occurrence only."""
        seq = sequence_type([1, 2, 1, 3])
        assert seq.remove_first_value(1)
        assert seq.to_list() == [2, 1, 3]
        assert not seq.remove_first_value(9)

    def test_remove_all_in(self, sequence_type):
        """Test removeAll with a plain list."""
        animals = sequence_type(["Dog", "Cat", "Goat", "Cow"])
        assert animals.remove_all_in(["Cow", "Cat"])
        assert animals.to_list() == ["Dog", "Goat"]
        assert not animals.remove_all_in(["Horse"])

    def test_remove_all_in_unhashable(self, sequence_type):
        """Test removeAll falls back to a linear scan for unhashable values."""
        seq = sequence_type([[1], [2], [3]])
        assert seq.remove_all_in([[2], [3]])
        assert seq.to_list() == [[1]]

    def test_raising_predicate_leaves_sequence_unchanged(self, sequence_type):
        """Test remove_all_matching is all-or-nothing."""
        seq = sequence_type([1, 2, 0, 4])
        with pytest.raises(ZeroDivisionError):
            seq.remove_all_matching(lambda v: 4 / v > 1)
        assert seq.to_list() == [1, 2, 0, 4]

    def test_extend_with_itself(self, sequence_type):
        """Test extending a sequence with its own contents."""
        seq = sequence_type([1, 2])
        assert seq.extend(seq)
        assert seq.to_list() == [1, 2, 1, 2]
        assert not seq.extend([])

    def test_clear(self, sequence_type):
        """Test clear then reuse."""
        seq = sequence_type(range(3))
        seq.clear()
        assert seq.is_empty()
        seq.append("again")
        assert seq.to_list() == ["again"]


class TestSearch:
    """Tests for contains and index lookups."""

    def test_contains(self, sequence_type):
        """Test membership checks."""
        seq = sequence_type([1, 2])
        assert seq.contains(1)
        assert 2 in seq
        assert 5 not in seq

    def test_index_of(self, sequence_type):
        """Test first and last index lookups."""
        seq = sequence_type(["Java", "Python", "JavaScript", "Python"])
        assert seq.index_of("Python") == 1
        assert seq.last_index_of("Python") == 3
        assert seq.index_of("Rust") == -1


class TestSort:
    """Tests for sort_with."""

    def test_stable(self, sequence_type, people):
        """Test elements equal under the policy keep their relative order."""
        seq = sequence_type(people)
        seq.sort_with(comparing(lambda p: p.age))
        assert [p.name for p in seq] == ["Rayan", "Gaurav", "Anita", "Ravi", "Bob"]

    def test_idempotent(self, sequence_type, people):
        """Test sorting an already sorted sequence changes nothing."""
        policy = comparing(lambda p: p.age).then_comparing(lambda p: p.name)
        seq = sequence_type(people)
        seq.sort_with(policy)
        once = seq.to_list()

        seq.sort_with(policy)
        assert seq.to_list() == once
        assert once[0] == Person(24, "Anita")

    def test_random_matches_sorted(self, sequence_type):
        """Test against Python's sort on shuffled input."""
        values = list(range(200))
        random.Random(7).shuffle(values)
        seq = sequence_type(values)
        seq.sort_with(natural_order())
        assert seq.to_list() == list(range(200))

    def test_raising_policy_leaves_order(self, sequence_type):
        """Test a failing comparison propagates and keeps the original order."""
        seq = sequence_type([3, "a", 1])
        with pytest.raises(TypeError):
            seq.sort_with(natural_order())
        assert seq.to_list() == [3, "a", 1]

    def test_custom_policy(self, sequence_type):
        """Test a hand-written descending comparator."""
        seq = sequence_type([1, 20, 3, 9, 5])
        seq.sort_with(OrderingPolicy(lambda a, b: b - a))
        assert seq.to_list() == [20, 9, 5, 3, 1]


class TestIteration:
    """Tests for range, fail-fast and async iteration."""

    def test_range_iteration(self, sequence_type):
        """Test iterating over [start, end)."""
        seq = sequence_type(range(10))
        assert list(seq.iterator(3, 7)) == [3, 4, 5, 6]
        assert list(seq.iterator(8)) == [8, 9]
        assert list(seq.iterator(end=2)) == [0, 1]
        assert list(seq.iterator(5, 5)) == []

    def test_invalid_range(self, sequence_type):
        """Test range bounds are validated."""
        seq = sequence_type(range(3))
        with pytest.raises(IndexOutOfRangeError):
            seq.iterator(2, 1)
        with pytest.raises(IndexOutOfRangeError):
            seq.iterator(0, 4)

    def test_fail_fast(self, sequence_type):
        """Test a structural change during iteration is detected."""
        seq = sequence_type([1, 2, 3])
        iterator = iter(seq)
        next(iterator)
        seq.append(4)
        with pytest.raises(InvalidCursorStateError):
            next(iterator)

    def test_reversed(self, sequence_type):
        """Test reverse iteration over populated and empty sequences."""
        assert list(reversed(sequence_type(["a", "b", "c"]))) == ["c", "b", "a"]
        assert list(reversed(sequence_type())) == []

    def test_reversed_fail_fast(self, sequence_type):
        """Test reverse iteration detects changes before and between steps."""
        seq = sequence_type([1, 2, 3])
        before_first = reversed(seq)
        seq.append(4)
        with pytest.raises(InvalidCursorStateError):
            next(before_first)

        between_steps = reversed(seq)
        assert next(between_steps) == 4
        seq.remove_at(0)
        with pytest.raises(InvalidCursorStateError):
            next(between_steps)

    def test_set_during_iteration(self, sequence_type):
        """Test replacing values does not break iteration."""
        seq = sequence_type([1, 2, 3])
        seen = []
        for index, value in enumerate(seq):
            seen.append(value)
            seq.set(index, value * 10)
        assert seen == [1, 2, 3]
        assert seq.to_list() == [10, 20, 30]

    async def test_async_iteration(self, sequence_type):
        """Test async for over the whole sequence and a range."""
        seq = sequence_type(["a", "b", "c", "d"])
        assert [value async for value in seq] == ["a", "b", "c", "d"]
        assert [value async for value in seq.async_iterator(1, 3)] == ["b", "c"]

    async def test_async_fail_fast(self, sequence_type):
        """Test async iteration is fail-fast too."""
        seq = sequence_type([1, 2])
        iterator = seq.async_iterator()
        await iterator.__anext__()
        seq.remove_at(0)
        with pytest.raises(InvalidCursorStateError):
            await iterator.__anext__()


class TestRendering:
    """Tests for textual rendering."""

    def test_str_and_repr(self, sequence_type):
        """Test the [v1, v2, v3] rendering."""
        seq = sequence_type([1, 2, 3])
        assert str(seq) == "[1, 2, 3]"
        assert repr(seq) == f"{sequence_type.__name__}([1, 2, 3])"
        assert len(seq) == 3
        assert isinstance(seq, Sequence)
