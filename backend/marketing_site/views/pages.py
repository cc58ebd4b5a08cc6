# marketing_site/views/pages.py
from flask import abort, g, redirect, render_template

from marketing_site.cms.fetch import (
    get_navigation,
    get_page_by_slug,
    get_site_settings,
    load_page_context,
)
from marketing_site.sections.composer import render_sections
from marketing_site.sections.registry import required_context
from . import site_bp

HOME_SLUG = "home"


def render_page(slug):
    draft = g.draft_mode
    page = get_page_by_slug(slug, draft=draft)
    settings = get_site_settings(draft=draft)
    navigation = get_navigation(draft=draft)

    if not page:
        if slug != HOME_SLUG:
            abort(404)
        # CMS has no homepage yet
        return render_template(
            "home_fallback.html", settings=settings or {}, navigation=navigation or {}
        )

    sections = page.get("sections") or []
    needed = required_context(sections) - {"settings"}
    context = load_page_context(needed, draft=draft)

    body = render_sections(
        sections,
        document_id=page.get("_id"),
        document_type=page.get("_type") or "page",
        editing=draft,
        settings=settings or {},
        **context,
    )

    return render_template(
        "page.html",
        page=page,
        body=body,
        settings=settings or {},
        navigation=navigation or {},
    )


@site_bp.route("/", methods=["GET"])
def home():
    return render_page(HOME_SLUG)


@site_bp.route("/<slug>", methods=["GET"])
def page(slug):
    if slug == HOME_SLUG:
        return redirect("/", code=308)
    return render_page(slug)
