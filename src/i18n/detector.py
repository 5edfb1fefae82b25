"""
src/i18n/detector.py
────────────────────
Locale detection from the URL path.

    detect_language("/uk/about")  # → Locale.UK
    detect_language("/fr")        # → Locale.EN
"""
from __future__ import annotations

from src.i18n.models import Locale


def first_segment(path: str) -> str:
    parts = (path or "").split("/")
    return parts[1] if len(parts) > 1 else ""


def detect_language(path: str) -> Locale:
    """Only the first path segment counts, compared case-insensitively."""
    return Locale.UK if first_segment(path).lower() == Locale.UK.value else Locale.EN
