# marketing_site/views/products.py
from flask import abort, g, render_template

from marketing_site.cms.fetch import (
    get_all_categories,
    get_all_products,
    get_navigation,
    get_product_by_slug,
    get_site_settings,
)
from . import site_bp

PRODUCTS_PATH = "/prodotti"


def _chrome(draft):
    return {
        "settings": get_site_settings(draft=draft) or {},
        "navigation": get_navigation(draft=draft) or {},
    }


@site_bp.route(PRODUCTS_PATH, methods=["GET"])
def product_list():
    draft = g.draft_mode
    return render_template(
        "products/list.html",
        products=get_all_products(draft=draft),
        categories=get_all_categories(draft=draft),
        **_chrome(draft),
    )


@site_bp.route(f"{PRODUCTS_PATH}/<slug>", methods=["GET"])
def product_detail(slug):
    draft = g.draft_mode
    product = get_product_by_slug(slug, draft=draft)
    if not product:
        abort(404)

    return render_template(
        "products/detail.html",
        product=product,
        specifications=[
            spec for spec in product.get("specifications") or [] if isinstance(spec, dict)
        ],
        **_chrome(draft),
    )
