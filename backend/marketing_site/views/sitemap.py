# marketing_site/views/sitemap.py
from flask import render_template, request

from marketing_site.cms.fetch import get_page_slugs, get_product_slugs
from .pages import HOME_SLUG
from .products import PRODUCTS_PATH
from . import site_bp


def sitemap_paths():
    """Public paths of every published page and product, home first."""
    # The catalog route shadows a page using its slug
    reserved = {HOME_SLUG, PRODUCTS_PATH.strip("/")}
    pages = [slug for slug in get_page_slugs() if slug and slug not in reserved]
    products = [slug for slug in get_product_slugs() if slug]

    paths = ["/"]
    paths += [f"/{slug}" for slug in sorted(set(pages))]
    paths.append(PRODUCTS_PATH)
    paths += [f"{PRODUCTS_PATH}/{slug}" for slug in sorted(set(products))]
    return paths


@site_bp.route("/sitemap.xml", methods=["GET"])
def sitemap():
    base = request.url_root.rstrip("/")
    body = render_template("sitemap.xml", urls=[base + path for path in sitemap_paths()])
    return body, 200, {"Content-Type": "application/xml; charset=utf-8"}
