"""Style model: compiled class styles as consumed by the clipboard format."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Breakpoint(StrEnum):
    """Responsive tiers understood by the Designer, narrowest first."""

    TINY = "tiny"  # max-width: 479px
    SMALL = "small"  # max-width: 767px
    MEDIUM = "medium"  # max-width: 991px


@dataclass(frozen=True)
class StyleRecord:
    """A named bundle of flattened CSS declarations.

    Attributes:
        id: Identifier referenced from element nodes' ``classes``.
        name: Source class name, without the leading dot.
        style_less: ``"prop: value"`` pairs joined by ``"; "``.
        variants: Per-breakpoint declaration strings.
    """

    id: str
    name: str
    style_less: str = ""
    variants: dict[Breakpoint, str] = field(default_factory=dict, hash=False)

    @property
    def is_empty(self) -> bool:
        return not self.style_less and not self.variants

    def to_dict(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "fake": False,
            "type": "class",
            "name": self.name,
            "namespace": "",
            "comb": "",
            "styleLess": self.style_less,
            "variants": {
                str(bp): {"styleLess": value} for bp, value in self.variants.items()
            },
            "children": [],
            "origin": None,
            "selector": None,
        }
