"""
src/i18n/loader.py
──────────────────
Translation bundle retrieval over HTTP.

Bundles live at `{origin}/locales/{en|uk}.json`. Every request asks
intermediate caches to revalidate so a freshly deployed bundle is picked up.
"""
from __future__ import annotations

import httpx
from pydantic import ValidationError

from config.i18n import LOCALES_PATH
from src.i18n.models import Bundle, BundleAdapter, Locale

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Accept": "application/json",
}


class BundleLoadError(Exception):
    """A bundle could not be fetched or parsed."""


def get_locales_url(origin: str, lang: str | Locale) -> str:
    locale = Locale.coerce(lang)
    return f"{origin.rstrip('/')}{LOCALES_PATH}/{locale.value}.json"


async def fetch_bundle(client: httpx.AsyncClient, url: str) -> Bundle:
    """
    GET one bundle.

    Raises:
        BundleLoadError: transport failure, non-2xx status, invalid JSON,
            or a body that is not a JSON object.
    """
    try:
        response = await client.get(url, headers=NO_CACHE_HEADERS)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise BundleLoadError(f"Failed to load {url} ({exc})") from exc

    if not response.is_success:
        raise BundleLoadError(f"Failed to load {url} ({response.status_code})")

    try:
        return BundleAdapter.validate_python(response.json())
    except ValidationError as exc:
        raise BundleLoadError(f"{url} is not a JSON object") from exc
    except (ValueError, RecursionError) as exc:
        raise BundleLoadError(f"{url} is not valid JSON ({exc})") from exc
