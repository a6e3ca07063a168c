from __future__ import annotations

import dataclasses

import pytest

from rendercli.core.context import Foo, build_render_context


def test_context_has_foo_and_coll() -> None:
    ctx = build_render_context()
    assert set(ctx) == {"foo", "coll"}
    assert ctx["foo"].name == "foo"
    assert ctx["coll"] == ["first", "second", "third"]


def test_each_call_builds_a_fresh_context() -> None:
    a = build_render_context()
    b = build_render_context()
    a["coll"].append("fourth")
    assert b["coll"] == ["first", "second", "third"]


def test_foo_is_immutable() -> None:
    foo = Foo()
    with pytest.raises(dataclasses.FrozenInstanceError):
        foo.name = "bar"  # type: ignore[misc]
