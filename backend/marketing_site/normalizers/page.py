from marketing_site.sections.composer import divider_after
from .section import normalize_section


def normalize_page(page, editor=False):
    sections = page.get("sections") or []

    return {
        "id": page.get("_id"),
        "type": page.get("_type"),
        "revision": page.get("_rev") if editor else None,
        "updated_at": page.get("_updatedAt") if editor else None,
        "title": page.get("title"),
        "slug": (page.get("slug") or {}).get("current"),
        "seo": page.get("seo") or {},
        # Entries without a type are skipped but still count as neighbours
        "sections": [
            normalize_section(s, divider_after(sections, i), editor=editor)
            for i, s in enumerate(sections)
            if s and s.get("_type")
        ],
    }
