"""
src/i18n/models.py
──────────────────
Locale, translator lifecycle state, and the bundle tree types.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import TypeAdapter

# A bundle node is a leaf (string or other JSON scalar) or a nested mapping.
Node = Union[str, int, float, bool, dict[str, Any]]
Bundle = dict[str, Any]

BundleAdapter: TypeAdapter[Bundle] = TypeAdapter(dict[str, Any])


class Locale(str, Enum):
    EN = "en"
    UK = "uk"

    @classmethod
    def coerce(cls, value: str | None) -> Locale:
        """`uk` for exactly "uk", `en` for anything else."""
        return cls.UK if value == cls.UK.value else cls.EN

    @property
    def path(self) -> str:
        return f"/{self.value}"


class TranslatorState(str, Enum):
    UNINITIALIZED = "uninitialized"
    DETECTING = "detecting"
    LOADING = "loading"
    READY = "ready"
