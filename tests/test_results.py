"""Tests for ResultView."""

from __future__ import annotations

import pytest

from venomock import ResultView, TypeMismatchError
from tests.conftest import Arg


class TestResultView:
    """Tests for positional access."""

    def test_at_in_range(self) -> None:
        view = ResultView((10, "x", None))
        assert view.at(0) == 10
        assert view.get(1) == "x"
        assert view.at(2) is None

    def test_at_out_of_range(self) -> None:
        view = ResultView((10,))
        assert view.at(1) is None
        assert view.at(-1) is None

    def test_contains(self) -> None:
        view = ResultView((None,))
        assert view.contains(0)
        assert not view.contains(1)
        assert not view.contains(-1)

    def test_sequence_protocol(self) -> None:
        view = ResultView((1, 2))
        assert len(view) == 2
        assert list(view) == [1, 2]
        assert view.values == (1, 2)
        assert repr(view) == "ResultView([1, 2])"


class TestTypedAccessors:
    """Tests for typed narrowing."""

    def test_present_values(self) -> None:
        error = ValueError("boom")
        view = ResultView((7, "s", True, 1.5, b"raw", error, Arg("a")))
        assert view.as_int(0) == 7
        assert view.as_str(1) == "s"
        assert view.as_bool(2) is True
        assert view.as_float(3) == 1.5
        assert view.as_bytes(4) == b"raw"
        assert view.as_error(5) is error
        assert view.as_type(6, Arg) == Arg("a")

    def test_absent_values_are_zero(self) -> None:
        view = ResultView()
        assert view.as_int(0) == 0
        assert view.as_str(0) == ""
        assert view.as_bool(0) is False
        assert view.as_float(0) == 0.0
        assert view.as_bytes(0) == b""
        assert view.as_error(0) is None
        assert view.as_type(0, Arg) is None

    def test_error_accepts_none(self) -> None:
        assert ResultView((10, None)).as_error(1) is None

    def test_mismatch_raises(self) -> None:
        view = ResultView(("not an int", 3, None))
        with pytest.raises(TypeMismatchError) as exc_info:
            view.as_int(0)
        assert exc_info.value.index == 0
        assert exc_info.value.expected == "int"
        assert exc_info.value.actual == "str"

        with pytest.raises(TypeMismatchError):
            view.as_str(1)
        with pytest.raises(TypeMismatchError):
            view.as_error(1)
        with pytest.raises(TypeMismatchError):
            view.as_str(2)

    def test_bool_is_not_an_int(self) -> None:
        with pytest.raises(TypeMismatchError):
            ResultView((True,)).as_int(0)

    def test_int_is_not_a_float(self) -> None:
        with pytest.raises(TypeMismatchError):
            ResultView((1,)).as_float(0)

    def test_mismatch_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            ResultView(("x",)).as_type(0, Arg)
