# marketing_site/api/v1/pages.py
from flask import g, jsonify
from marketing_site.cms.fetch import get_page_by_slug
from marketing_site.normalizers.page import normalize_page
from . import v1_bp


@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    page = get_page_by_slug(slug, draft=g.draft_mode)
    if not page:
        return jsonify({"error": "Page not found"}), 404

    return jsonify(normalize_page(page, editor=g.draft_mode))
