"""Placeholder substitution for notification templates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from app.domain.exceptions import MissingVariableError

_PLACEHOLDER = re.compile(r"\{\{\s*([A-Za-z0-9_.\-]+)\s*\}\}")


def referenced_variables(text: str | None) -> list[str]:
    """Return the placeholder names used by ``text`` in order of appearance."""

    if not text:
        return []
    seen: dict[str, None] = {}
    for match in _PLACEHOLDER.finditer(text):
        seen.setdefault(match.group(1), None)
    return list(seen)


def render_template(text: str | None, variables: Mapping[str, Any]) -> str:
    """Replace every ``{{name}}`` in ``text`` with its binding.

    A binding of ``None`` renders as an empty string; a placeholder without a
    binding raises :class:`MissingVariableError`.
    """

    if not text:
        return ""

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in variables:
            raise MissingVariableError(name)
        value = variables[name]
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(_substitute, text)


__all__ = ["referenced_variables", "render_template"]
