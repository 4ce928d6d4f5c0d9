"""Style compiler: CSS text plus requested class names -> style records."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from flowpaste.errors import ContractError, require_text
from flowpaste.ids import IdFactory, uuid_ids
from flowpaste.model.style import Breakpoint, StyleRecord
from flowpaste.stylesheet.model import AtRule, CssRule, ParsedStylesheet, find_rule
from flowpaste.stylesheet.parser import parse_stylesheet, split_at_rules, parse_rules
from flowpaste.stylesheet.variables import resolve_variables

__all__ = [
    "StyleSheetResult",
    "compile_styles",
    "compile_responsive_styles",
    "flatten_declarations",
    "extract_advanced_css",
    "breakpoint_for",
]

logger = logging.getLogger(__name__)

# At-rule blocks handed through untouched for a custom-code embed.
_ADVANCED_AT_RULES = frozenset(
    {"media", "keyframes", "-webkit-keyframes", "-moz-keyframes", "-o-keyframes"}
)

_MAX_WIDTH_RE = re.compile(r"max-width\s*:\s*(?P<px>\d+)px", re.IGNORECASE)

_MAX_WIDTH_TIERS: dict[int, Breakpoint] = {
    479: Breakpoint.TINY,
    480: Breakpoint.TINY,
    767: Breakpoint.SMALL,
    768: Breakpoint.SMALL,
    991: Breakpoint.MEDIUM,
    992: Breakpoint.MEDIUM,
}

_FIRST_COLON_RE = re.compile(r"\s*:\s*")


@dataclass(frozen=True)
class StyleSheetResult:
    """Everything the style compiler produces for one call.

    Attributes:
        class_to_id: Class name -> style record id, in request order.
        styles: One record per requested class, in request order.
        advanced_css: Media queries, keyframes and pseudo-selector rules
            that the style records cannot express, as plain CSS text.
    """

    class_to_id: dict[str, str] = field(default_factory=dict)
    styles: list[StyleRecord] = field(default_factory=list)
    advanced_css: str = ""

    def style_for(self, class_name: str) -> StyleRecord | None:
        style_id = self.class_to_id.get(class_name)
        for style in self.styles:
            if style.id == style_id:
                return style
        return None


def flatten_declarations(
    declarations: Iterable[str], variables: dict[str, str] | None = None
) -> str:
    """Join declarations as ``"prop: value"`` pairs separated by ``"; "``."""
    variables = variables or {}
    flattened: list[str] = []
    for raw in declarations:
        decl = raw.replace("{", "").replace("}", "").strip().rstrip(";").strip()
        if not decl:
            continue
        decl = _FIRST_COLON_RE.sub(": ", decl, count=1)
        flattened.append(resolve_variables(decl, variables))
    return "; ".join(flattened)


def breakpoint_for(condition: str) -> Breakpoint | None:
    """Map a media query condition to a breakpoint tier, if it has one."""
    match = _MAX_WIDTH_RE.search(condition)
    if match is None:
        return None
    return _MAX_WIDTH_TIERS.get(int(match.group("px")))


def _format_rule(rule: CssRule) -> str:
    lines = [f"{rule.selector} {{"]
    lines.extend(f"  {decl};" for decl in rule.declarations)
    lines.append("}")
    return "\n".join(lines)


def extract_advanced_css(sheet: ParsedStylesheet) -> str:
    """Collect the CSS that class styles cannot carry.

    Pseudo-selector rules come first, rebuilt from their declarations,
    followed by ``@media`` and ``@keyframes`` blocks exactly as written.
    """
    blocks = [_format_rule(rule) for rule in sheet.rules if rule.is_pseudo]
    blocks.extend(a.text for a in sheet.at_rules if a.name in _ADVANCED_AT_RULES)
    return "\n\n".join(blocks)


def _check_class_names(class_names: Iterable[str] | None) -> list[str]:
    if class_names is None:
        raise ContractError("class_names must not be None", argument="class_names")
    if isinstance(class_names, str):
        raise ContractError(
            "class_names must be an iterable of names, not a single string",
            argument="class_names",
        )
    return list(class_names)


def _media_rules(at_rules: list[AtRule]) -> dict[Breakpoint, list[CssRule]]:
    """Group the rules of every tier-mapped ``@media`` block by tier."""
    by_tier: dict[Breakpoint, list[CssRule]] = {}
    for at_rule in at_rules:
        if at_rule.name != "media":
            continue
        tier = breakpoint_for(at_rule.prelude)
        if tier is None:
            logger.debug("No breakpoint tier for @media %s", at_rule.prelude)
            continue
        plain, _nested = split_at_rules(at_rule.body)
        by_tier.setdefault(tier, []).extend(parse_rules(plain))
    return by_tier


def compile_styles(
    css_text: str,
    class_names: Iterable[str],
    new_id: IdFactory | None = None,
) -> StyleSheetResult:
    """Compile one style record per requested class.

    The first rule whose selector starts with the class wins; classes with
    no matching rule still get a record with an empty declaration string.
    """
    css_text = require_text(css_text, "css_text")
    names = _check_class_names(class_names)
    new_id = new_id or uuid_ids()

    sheet = parse_stylesheet(css_text)
    class_to_id: dict[str, str] = {}
    styles: list[StyleRecord] = []
    for name in names:
        if name in class_to_id:
            continue
        style_id = new_id()
        class_to_id[name] = style_id
        rule = sheet.find_rule(name)
        if rule is None:
            logger.debug("No CSS rule for class %r", name)
        style_less = flatten_declarations(rule.declarations, sheet.variables) if rule else ""
        styles.append(StyleRecord(id=style_id, name=name, style_less=style_less))

    return StyleSheetResult(
        class_to_id=class_to_id,
        styles=styles,
        advanced_css=extract_advanced_css(sheet),
    )


def compile_responsive_styles(
    css_text: str,
    class_names: Iterable[str],
    new_id: IdFactory | None = None,
) -> StyleSheetResult:
    """Like :func:`compile_styles`, adding per-breakpoint variants.

    Base declarations come only from rules outside ``@media`` blocks. Each
    ``max-width`` query that maps to a tier contributes that tier's variant,
    matched with the same first-rule-wins logic.
    """
    css_text = require_text(css_text, "css_text")
    names = _check_class_names(class_names)
    new_id = new_id or uuid_ids()

    sheet = parse_stylesheet(css_text)
    tiers = _media_rules(sheet.at_rules)
    class_to_id: dict[str, str] = {}
    styles: list[StyleRecord] = []
    for name in names:
        if name in class_to_id:
            continue
        style_id = new_id()
        class_to_id[name] = style_id
        base = sheet.find_rule(name)
        variants: dict[Breakpoint, str] = {}
        for tier in Breakpoint:
            rule = find_rule(tiers.get(tier, []), name)
            if rule is not None:
                variants[tier] = flatten_declarations(rule.declarations, sheet.variables)
        styles.append(
            StyleRecord(
                id=style_id,
                name=name,
                style_less=flatten_declarations(base.declarations, sheet.variables)
                if base
                else "",
                variants=variants,
            )
        )

    return StyleSheetResult(
        class_to_id=class_to_id,
        styles=styles,
        advanced_css=extract_advanced_css(sheet),
    )
