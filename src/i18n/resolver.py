"""
src/i18n/resolver.py
────────────────────
Dotted-key lookup over a bundle tree.

    get_nested_value({"nav": {"home": "Home"}}, "nav.home")  # → "Home"
    get_nested_value({"nav": {"home": "Home"}}, "nav.blog")  # → None
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from src.i18n.models import Node


def _descend(node: Any, segments: Sequence[str]) -> Node | None:
    if node is None:
        return None
    if not segments:
        return node
    if not isinstance(node, Mapping) or segments[0] not in node:
        return None
    return _descend(node[segments[0]], segments[1:])


def get_nested_value(bundle: Mapping[str, Any], path: str) -> Node | None:
    """Resolve `path` segment by segment; None as soon as a step is missing."""
    return _descend(bundle, path.split("."))


def resolve(bundle: Mapping[str, Any], key: str, fallback: str | None = None) -> Node:
    """
    Translate a dot-separated key.

    Precedence: resolved value, else `fallback` unless it is None, else the
    key itself. An explicit empty-string fallback is returned as given.
    """
    value = get_nested_value(bundle, key)
    if value is not None:
        return value
    if fallback is not None:
        return fallback
    return key
