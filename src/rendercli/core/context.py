"""Sample data the bundled templates are rendered against."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

SAMPLE_COLLECTION = ("first", "second", "third")


@dataclass(frozen=True)
class Foo:
    name: str = "foo"


def build_render_context() -> Dict[str, Any]:
    """Return a fresh render context with ``foo`` and ``coll`` entries."""
    return {
        "foo": Foo(),
        "coll": list(SAMPLE_COLLECTION),
    }


__all__ = ["Foo", "SAMPLE_COLLECTION", "build_render_context"]
