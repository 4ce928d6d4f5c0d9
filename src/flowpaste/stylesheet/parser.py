"""Hand-written, regex-driven CSS splitter.

This is not a tokenizer: it understands comments, ``:root``
custom properties, top-level at-rule blocks and flat ``selector { ... }``
rules. Anything it cannot match is skipped rather than reported.
"""

from __future__ import annotations

import logging
import re

from flowpaste.stylesheet.model import AtRule, CssRule, ParsedStylesheet

__all__ = [
    "strip_comments",
    "extract_root_variables",
    "split_at_rules",
    "parse_rules",
    "split_declarations",
    "parse_stylesheet",
    "extract_class_names",
]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

_ROOT_RE = re.compile(r":root\s*\{")

# Matches a complete flat rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)    # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^{}]*)         # declarations, no nested blocks
    \}                       # closing brace
    """,
    re.VERBOSE,
)

# Matches a custom property declaration: --name: value
_CUSTOM_PROP_RE = re.compile(r"^(?P<name>--[\w-]+)\s*:\s*(?P<value>.*)$", re.DOTALL)

_AT_KEYWORD_RE = re.compile(r"@(?P<name>[\w-]+)")

# Class selectors must start with a letter.
_CLASS_RE = re.compile(r"\.([a-zA-Z][\w-]*)")


def strip_comments(css: str) -> str:
    """Remove every ``/* ... */`` comment."""
    return _COMMENT_RE.sub("", css)


def _block_end(text: str, open_index: int) -> int:
    """Return the index just past the brace matching ``text[open_index]``.

    Returns -1 when the block is never closed.
    """
    depth = 0
    for i in range(open_index, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


def split_declarations(body: str) -> list[str]:
    """Split a declaration block on ``;``, ignoring ``;`` inside parentheses."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(body):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == ";" and depth == 0:
            parts.append(body[start:i])
            start = i + 1
    parts.append(body[start:])
    return [p.strip() for p in parts if p.strip()]


def extract_root_variables(css: str) -> tuple[dict[str, str], str]:
    """Collect ``--name: value`` pairs from every ``:root`` block.

    Returns the variable table and *css* with the root blocks removed. Later
    declarations of the same name replace earlier ones.
    """
    variables: dict[str, str] = {}
    remainder: list[str] = []
    pos = 0
    while True:
        match = _ROOT_RE.search(css, pos)
        if match is None:
            break
        open_index = match.end() - 1
        end = _block_end(css, open_index)
        if end == -1:
            logger.debug("Unterminated :root block at offset %d", match.start())
            break
        for decl in split_declarations(css[open_index + 1 : end - 1]):
            prop = _CUSTOM_PROP_RE.match(decl)
            if prop:
                variables[prop.group("name")] = prop.group("value").strip()
        remainder.append(css[pos : match.start()])
        pos = end
    remainder.append(css[pos:])
    return variables, "".join(remainder)


def split_at_rules(css: str) -> tuple[str, list[AtRule]]:
    """Separate top-level at-rule blocks from plain rules.

    Statement at-rules such as ``@import url(x);`` are dropped. An at-rule
    block that is never closed swallows the rest of the text.
    """
    plain: list[str] = []
    at_rules: list[AtRule] = []
    depth = 0
    start = 0
    i = 0
    while i < len(css):
        ch = css[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(depth - 1, 0)
        elif ch == "@" and depth == 0:
            brace = css.find("{", i)
            semi = css.find(";", i)
            if brace != -1 and (semi == -1 or brace < semi):
                plain.append(css[start:i])
                end = _block_end(css, brace)
                if end == -1:
                    logger.debug("Unterminated at-rule at offset %d", i)
                    return "".join(plain), at_rules
                keyword = _AT_KEYWORD_RE.match(css, i)
                at_rules.append(
                    AtRule(
                        name=keyword.group("name").lower() if keyword else "",
                        prelude=css[keyword.end() if keyword else i + 1 : brace].strip(),
                        body=css[brace + 1 : end - 1],
                        text=css[i:end].strip(),
                    )
                )
                i = start = end
                continue
            if semi != -1:
                plain.append(css[start:i])
                i = start = semi + 1
                continue
        i += 1
    plain.append(css[start:])
    return "".join(plain), at_rules


def parse_rules(css: str) -> list[CssRule]:
    """Parse flat ``selector { declarations }`` rules in source order."""
    rules: list[CssRule] = []
    for match in _RULE_RE.finditer(css):
        selector = match.group("selector").strip()
        if not selector:
            continue
        rules.append(
            CssRule(
                selector=selector,
                declarations=tuple(split_declarations(match.group("body"))),
            )
        )
    return rules


def parse_stylesheet(css: str) -> ParsedStylesheet:
    """Split a raw CSS string into root variables, at-rules and plain rules."""
    cleaned = strip_comments(css)
    variables, remainder = extract_root_variables(cleaned)
    plain, at_rules = split_at_rules(remainder)
    return ParsedStylesheet(
        rules=parse_rules(plain),
        at_rules=at_rules,
        variables=variables,
    )


def extract_class_names(css: str) -> list[str]:
    """Return every class name used in a rule selector, in first-seen order.

    Selectors inside at-rule blocks count as well, so classes that are only
    styled responsively are still discovered.
    """
    names: dict[str, None] = {}
    cleaned = strip_comments(css)
    for match in _RULE_RE.finditer(cleaned):
        selector = match.group("selector")
        # Text after a statement at-rule such as @import ends up in front.
        selector = selector.rsplit(";", 1)[-1]
        if selector.lstrip().startswith("@"):
            continue
        for class_match in _CLASS_RE.finditer(selector):
            names.setdefault(class_match.group(1), None)
    return list(names)
