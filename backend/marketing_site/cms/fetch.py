# marketing_site/cms/fetch.py
"""
Best-effort read helpers.

A failing read is logged and returned as an empty result so the page can
still render with whatever data is available.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from flask import current_app

from marketing_site.exceptions import CMSError
from .client import get_client
from . import queries


def _safe_fetch(name: str, query: str, params=None, *, draft: bool = False, default=None):
    try:
        result = get_client().fetch(query, params, draft=draft)
    except CMSError as exc:
        current_app.logger.error("CMS fetch %s failed: %s", name, exc)
        return default
    return result if result is not None else default


def get_page_by_slug(slug: str, draft: bool = False) -> Optional[Dict[str, Any]]:
    return _safe_fetch("page", queries.PAGE_BY_SLUG_QUERY, {"slug": slug}, draft=draft)


def get_page_slugs() -> List[str]:
    return _safe_fetch("page_slugs", queries.PAGE_SLUGS_QUERY, default=[])


def get_site_settings(draft: bool = False) -> Optional[Dict[str, Any]]:
    return _safe_fetch("settings", queries.SITE_SETTINGS_QUERY, draft=draft)


def get_navigation(draft: bool = False) -> Optional[Dict[str, Any]]:
    return _safe_fetch("navigation", queries.NAVIGATION_QUERY, draft=draft)


def get_featured_products(draft: bool = False) -> List[Dict[str, Any]]:
    return _safe_fetch("featured_products", queries.FEATURED_PRODUCTS_QUERY, draft=draft, default=[])


def get_all_testimonials(draft: bool = False) -> List[Dict[str, Any]]:
    return _safe_fetch("testimonials", queries.ALL_TESTIMONIALS_QUERY, draft=draft, default=[])


def get_all_products(draft: bool = False) -> List[Dict[str, Any]]:
    return _safe_fetch("products", queries.ALL_PRODUCTS_QUERY, draft=draft, default=[])


def get_product_by_slug(slug: str, draft: bool = False) -> Optional[Dict[str, Any]]:
    return _safe_fetch("product", queries.PRODUCT_BY_SLUG_QUERY, {"slug": slug}, draft=draft)


def get_product_slugs() -> List[str]:
    return _safe_fetch("product_slugs", queries.PRODUCT_SLUGS_QUERY, default=[])


def get_all_categories(draft: bool = False) -> List[Dict[str, Any]]:
    return _safe_fetch("categories", queries.ALL_CATEGORIES_QUERY, draft=draft, default=[])


CONTEXT_LOADERS = {
    "products": get_featured_products,
    "testimonials": get_all_testimonials,
    "settings": get_site_settings,
}


def load_page_context(names, draft: bool = False) -> Dict[str, Any]:
    """Fetch only the page-level datasets the page's sections ask for."""
    return {name: CONTEXT_LOADERS[name](draft=draft) for name in sorted(names) if name in CONTEXT_LOADERS}
