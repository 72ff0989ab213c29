"""Tests for domain/model/view.py."""

import copy
import io

import pytest

from fsview.domain.exceptions import (
    InvalidPredicateError,
    InvalidSliceError,
    InvalidSourceError,
    OutOfRangeError,
)
from fsview.domain.model.view import FilteredStringView
from fsview.domain.predicates.base import accept_all
from tests.factories import is_consonant, is_vowel, make_view, reject_all


class TestConstruction:
    """Tests for FilteredStringView construction."""

    def test_default_is_empty(self) -> None:
        view = FilteredStringView()

        assert view.empty()
        assert view.size() == 0
        assert view.data is None
        assert view.bounds == (0, 0)
        assert view.predicate is accept_all

    def test_from_string(self) -> None:
        source = "unsw"
        view = FilteredStringView(source)

        assert view.size() == 4
        assert view.data == "unsw"
        assert view.data is source

    def test_with_predicate(self) -> None:
        view = FilteredStringView("cat", lambda c: c == "a")

        assert view.size() == 1
        assert view.at(0) == "a"

    def test_empty_string(self) -> None:
        view = FilteredStringView("")

        assert view.empty()
        assert view.data == ""
        assert view.raw_length == 0

    def test_non_string_source_raises(self) -> None:
        with pytest.raises(InvalidSourceError, match="bytes"):
            FilteredStringView(b"bytes")  # type: ignore[arg-type]

    def test_non_callable_predicate_raises(self) -> None:
        with pytest.raises(InvalidPredicateError, match="int"):
            FilteredStringView("abc", 42)  # type: ignore[arg-type]

    def test_errors_are_type_errors(self) -> None:
        with pytest.raises(TypeError):
            FilteredStringView(["a"])  # type: ignore[arg-type]


class TestAccessors:
    """Tests for size, empty, data, predicate, positions."""

    def test_size_after_filter(self) -> None:
        view = make_view("Toy Poodle", lambda c: c == "o")
        assert view.size() == 3
        assert len(view) == 3

    def test_size_counts_raw_length_without_filter(self) -> None:
        assert make_view("Maltese").size() == 7

    def test_empty_false_for_non_empty(self) -> None:
        view = make_view("Australian Shephard")
        assert view.empty() is False
        assert bool(view) is True

    def test_empty_when_nothing_matches(self) -> None:
        view = make_view("Border Collie", lambda c: c == "z")
        assert view.empty() is True
        assert not view

    def test_data_ignores_predicate(self) -> None:
        source = "Sum 42"
        view = make_view(source, reject_all)

        assert view.data is source
        assert view.empty()

    def test_predicate_is_stored(self) -> None:
        calls: list[str] = []

        def record(char: str) -> bool:
            calls.append(char)
            return True

        view = make_view("doggo", record)

        assert view.predicate is record
        assert view.predicate("x") is True
        assert calls == ["x"]

    def test_positions(self) -> None:
        view = make_view("Malamute", is_vowel)
        assert view.positions() == (1, 3, 5, 7)

    def test_size_is_recomputed(self) -> None:
        allowed = {"a"}
        view = make_view("abc", lambda c: c in allowed)
        assert view.size() == 1

        allowed.add("b")
        assert view.size() == 2


class TestAt:
    """Tests for at() and indexing."""

    def test_at_returns_filtered_characters(self) -> None:
        view = make_view("Malamute", is_vowel)

        assert [view.at(i) for i in range(4)] == ["a", "a", "u", "e"]

    def test_at_on_empty_raises(self) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            make_view("").at(0)

        assert exc_info.value.index == 0
        assert exc_info.value.size == 0

    def test_at_negative_raises(self) -> None:
        with pytest.raises(OutOfRangeError, match=r"at\(-1\)"):
            make_view("abc").at(-1)

    def test_at_past_end_raises(self) -> None:
        view = make_view("Malamute", is_vowel)
        with pytest.raises(OutOfRangeError) as exc_info:
            view.at(4)
        assert exc_info.value.size == 4

    def test_out_of_range_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            make_view("abc").at(3)

    def test_subscript(self) -> None:
        view = make_view("only 90s kids understand", lambda c: c in "90 ")
        assert view[2] == "0"

    def test_subscript_is_checked(self) -> None:
        view = make_view("only 90s kids understand", lambda c: c in "90 ")
        with pytest.raises(OutOfRangeError):
            view[100]

    def test_at_matches_iteration(self) -> None:
        view = make_view("samoyed", is_consonant)
        assert [view.at(i) for i in range(view.size())] == list(view)


class TestSlicing:
    """Tests for slice indexing."""

    def test_slice_shares_source(self) -> None:
        source = "Siberian Husky"
        view = make_view(source)
        part = view[9:]

        assert isinstance(part, FilteredStringView)
        assert part == "Husky"
        assert part.data is source

    def test_slice_of_filtered_view(self) -> None:
        view = make_view("a-b-c-d", lambda c: c != "-")
        assert view[1:3] == "bc"
        assert view[-2:] == "cd"

    def test_empty_slice(self) -> None:
        view = make_view("abc")
        part = view[2:1]
        assert isinstance(part, FilteredStringView)
        assert part.empty()

    def test_step_raises(self) -> None:
        with pytest.raises(InvalidSliceError):
            make_view("abcdef")[::2]


class TestConversion:
    """Tests for string conversion and stream output."""

    def test_str_allocates_new_string(self) -> None:
        view = make_view("vizsla")
        assert str(view) == "vizsla"

    def test_str_filters(self) -> None:
        view = make_view("c++ > rust > java", lambda c: c in "c+")
        assert view.to_string() == "c++"

    def test_round_trip(self) -> None:
        view = make_view("Malamute", is_consonant)
        assert FilteredStringView(str(view)) == view

    def test_write_to(self) -> None:
        view = make_view("c++ > rust > java", lambda c: c in "c+")
        stream = io.StringIO()

        returned = view.write_to(stream)

        assert returned is stream
        assert stream.getvalue() == "c++"

    def test_repr(self) -> None:
        assert repr(make_view("cat", is_vowel)) == "FilteredStringView('a')"

    def test_contains(self) -> None:
        view = make_view("c / c++", lambda c: c != " ")
        assert "c/c" in view
        assert " " not in view
        assert 1 not in view


class TestCopyMove:
    """Tests for copy, take (move), assign."""

    def test_copy_shares_data(self) -> None:
        view = make_view("bulldog")
        dup = view.copy()

        assert dup.data is view.data
        assert dup == view
        assert dup is not view

    def test_copy_module(self) -> None:
        view = make_view("hello", is_vowel)
        dup = copy.copy(view)

        assert dup.data is view.data
        assert dup.predicate is view.predicate
        assert dup.size() == view.size() == 2

    def test_take_transfers_state(self) -> None:
        source = "world"
        view = make_view(source)

        moved = view.take()

        assert moved.size() == 5
        assert moved.data is source
        assert view.empty()
        assert view.data is None
        assert view.predicate is accept_all
        assert view.bounds == (0, 0)

    def test_moved_from_is_usable(self) -> None:
        view = make_view("world")
        view.take()

        assert str(view) == ""
        assert list(view) == []
        assert list(reversed(view)) == []
        with pytest.raises(OutOfRangeError):
            view.at(0)

    def test_assign_copies(self) -> None:
        source = make_view("42 bro", lambda c: c in "42")
        target = FilteredStringView()

        returned = target.assign(source)

        assert returned is target
        assert target == source
        assert target.data is source.data

    def test_assign_self(self) -> None:
        view = make_view("abc", is_vowel)
        assert view.assign(view) is view
        assert view == "a"

    def test_move_assign(self) -> None:
        source = make_view("'89 baby", lambda c: c in "89")
        target = FilteredStringView()

        target.assign(source.take())

        assert source.empty()
        assert source.data is None
        assert target == "89"

    def test_copy_with(self) -> None:
        view = make_view("abcde")
        vowels = view.copy_with(is_vowel)

        assert vowels == "ae"
        assert vowels.data is view.data


class TestRestrict:
    """Tests for restrict() and span()."""

    def test_restrict_narrows_window(self) -> None:
        view = make_view("abcdef")
        part = view.restrict(1, 4)

        assert part.bounds == (1, 4)
        assert part == "bcd"

    def test_restrict_intersects(self) -> None:
        part = make_view("abcdef").restrict(2, 5).restrict(0, 3)
        assert part.bounds == (2, 3)
        assert part == "c"

    def test_restrict_disjoint_is_empty(self) -> None:
        part = make_view("abcdef").restrict(2, 3).restrict(4, 6)
        assert part.empty()
        assert part.raw_length == 0

    def test_restrict_keeps_predicate(self) -> None:
        part = make_view("abcdef", is_vowel).restrict(0, 4)
        assert part == "a"

    def test_span(self) -> None:
        view = make_view("a.b.c", lambda c: c != ".")
        part = view.span(1, 3)

        assert part == "bc"
        assert part.bounds == (2, 5)

    def test_empty_span_anchors_at_position(self) -> None:
        view = make_view("a.b.c", lambda c: c != ".")
        assert view.span(1, 1).bounds == (2, 2)
        assert view.span(3, 3).bounds == (5, 5)


class TestComparison:
    """Tests for equality and ordering."""

    def test_not_equal(self) -> None:
        lo = make_view("aaa")
        hi = make_view("zzz")

        assert lo != hi
        assert not lo == hi

    def test_ordering(self) -> None:
        lo = make_view("aaa")
        hi = make_view("zzz")

        assert lo < hi
        assert lo <= hi
        assert not lo > hi
        assert not lo >= hi

    def test_equal_across_buffers(self) -> None:
        left = make_view("a-b-c", lambda c: c != "-")
        right = make_view("abc")

        assert left == right
        assert left.data is not right.data

    def test_compare_with_str(self) -> None:
        view = make_view("Sled Dog", str.isupper)
        assert view == "SD"
        assert view < "SE"

    def test_compare_with_other_type(self) -> None:
        assert make_view("1") != 1
        with pytest.raises(TypeError):
            make_view("a") < 1  # noqa: B015

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(make_view("a"))
