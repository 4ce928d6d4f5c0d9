"""Custom property resolution: replaces ``var(--name[, fallback])`` references."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_VAR_OPEN_RE = re.compile(r"var\(")


def _closing_paren(text: str, open_index: int) -> int:
    """Return the index just past the ``)`` matching ``text[open_index]``.

    Returns -1 when the parenthesis is never closed.
    """
    depth = 0
    for i in range(open_index, len(text)):
        ch = text[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


def _split_reference(inner: str) -> tuple[str, str | None]:
    """Split ``--name, fallback`` at the first comma outside parentheses."""
    depth = 0
    for i, ch in enumerate(inner):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            return inner[:i].strip(), inner[i + 1 :].strip()
    return inner.strip(), None


def resolve_variables(
    value: str,
    variables: dict[str, str],
    _seen: frozenset[str] = frozenset(),
) -> str:
    """Resolve var() references in *value* against *variables*.

    A variable's own value is resolved recursively, as is a fallback of any
    nesting depth. References that cannot be resolved and have no fallback,
    including self-referencing cycles, are left as literal text.
    """
    if "var(" not in value:
        return value

    parts: list[str] = []
    pos = 0
    while True:
        match = _VAR_OPEN_RE.search(value, pos)
        if match is None:
            break
        end = _closing_paren(value, match.end() - 1)
        if end == -1:
            logger.debug("Unterminated var() at offset %d", match.start())
            break
        parts.append(value[pos : match.start()])
        name, fallback = _split_reference(value[match.end() : end - 1])
        if name in variables and name not in _seen:
            parts.append(resolve_variables(variables[name], variables, _seen | {name}))
        elif fallback is not None:
            parts.append(resolve_variables(fallback, variables, _seen))
        else:
            logger.debug("Unresolved CSS variable %s", name)
            parts.append(value[match.start() : end])
        pos = end
    parts.append(value[pos:])
    return "".join(parts)
