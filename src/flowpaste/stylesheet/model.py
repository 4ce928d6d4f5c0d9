"""Stylesheet model: CssRule, AtRule, and ParsedStylesheet dataclasses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Characters that may follow ``.name`` when the class opens a compound or
# descendant selector.
_CLASS_BOUNDARIES = (" ", ":", ".")

# Attribute selectors may quote values containing colons.
_ATTRIBUTE_SELECTOR_RE = re.compile(r"\[[^\]]*\]")


@dataclass(frozen=True)
class CssRule:
    """A plain rule: one selector text and its declarations in source order."""

    selector: str
    declarations: tuple[str, ...]

    @property
    def is_pseudo(self) -> bool:
        """True when the selector targets a pseudo-class or pseudo-element."""
        return ":" in _ATTRIBUTE_SELECTOR_RE.sub("", self.selector)

    def matches_class(self, class_name: str) -> bool:
        target = f".{class_name}"
        if self.selector == target:
            return True
        return any(self.selector.startswith(target + b) for b in _CLASS_BOUNDARIES)


@dataclass(frozen=True)
class AtRule:
    """A top-level at-rule block kept as written.

    Attributes:
        name: At-keyword without the ``@`` (``media``, ``keyframes``, ...).
        prelude: Text between the keyword and the opening brace.
        body: Text between the braces.
        text: The complete block, from ``@`` to the closing brace.
    """

    name: str
    prelude: str
    body: str
    text: str


@dataclass(frozen=True)
class ParsedStylesheet:
    """Result of splitting a CSS string into its parts."""

    rules: list[CssRule] = field(default_factory=list)
    at_rules: list[AtRule] = field(default_factory=list)
    variables: dict[str, str] = field(default_factory=dict)

    def find_rule(self, class_name: str) -> CssRule | None:
        return find_rule(self.rules, class_name)


def find_rule(rules: list[CssRule], class_name: str) -> CssRule | None:
    """Return the first rule that targets *class_name*; textual order wins."""
    for rule in rules:
        if rule.matches_class(class_name):
            return rule
    return None
