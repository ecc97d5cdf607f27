"""Tests for out-parameter references and mutations."""

from __future__ import annotations

import pytest

from venomock import ArgumentMutationError, Mutation, Ref


class TestRef:
    """Tests for Ref."""

    def test_get_and_set(self) -> None:
        ref: Ref[str] = Ref()
        assert ref.get() is None
        ref.set("x")
        assert ref.value == "x"

    def test_equality_by_value(self) -> None:
        assert Ref("x") == Ref("x")
        assert Ref("x") != Ref("y")


class TestMutation:
    """Tests for Mutation.apply."""

    def test_direct_into_ref(self) -> None:
        out: Ref[str] = Ref()
        Mutation(1, "hello").apply("load", ("key", out))
        assert out.value == "hello"

    def test_boxed_into_ref(self) -> None:
        out: Ref[Ref[str]] = Ref()
        Mutation(0, "hello", boxed=True).apply("load", (out,))
        assert out.value == Ref("hello")
        assert out.value is not None and out.value.value == "hello"

    def test_into_list(self) -> None:
        out = [1, 2, 3]
        Mutation(0, ["a"]).apply("fill", (out,))
        assert out == ["a"]

    def test_into_dict(self) -> None:
        out = {"old": 1}
        Mutation(0, {"new": 2}).apply("fill", (out,))
        assert out == {"new": 2}

    def test_position_out_of_range(self) -> None:
        with pytest.raises(ArgumentMutationError) as exc_info:
            Mutation(2, "x").apply("load", ("key", Ref()))
        assert exc_info.value.position == 2
        assert exc_info.value.context.operation == "load"

    def test_not_writable(self) -> None:
        with pytest.raises(ArgumentMutationError, match="cannot receive"):
            Mutation(0, "x").apply("load", ("key",))

    def test_boxed_needs_ref(self) -> None:
        with pytest.raises(ArgumentMutationError):
            Mutation(0, ["x"], boxed=True).apply("fill", ([],))

    def test_errors_are_not_recoverable(self) -> None:
        with pytest.raises(ArgumentMutationError) as exc_info:
            Mutation(0, "x").apply("load", (42,))
        assert exc_info.value.recoverable is False
