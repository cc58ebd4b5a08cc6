# marketing_site/cms/portable_text.py
"""Render Portable Text blocks to HTML. Unknown block types are skipped."""
from __future__ import annotations

from typing import Any, Iterable, List

from markupsafe import Markup, escape

BLOCK_TAGS = {
    "normal": "p",
    "h1": "h1",
    "h2": "h2",
    "h3": "h3",
    "h4": "h4",
    "blockquote": "blockquote",
}
MARK_TAGS = {"strong": "strong", "em": "em", "underline": "u", "code": "code"}
LIST_TAGS = {"bullet": "ul", "number": "ol"}


def _render_span(span, mark_defs) -> str:
    text = str(escape(span.get("text", ""))).replace("\n", "<br>")
    for mark in span.get("marks") or ():
        if mark in MARK_TAGS:
            tag = MARK_TAGS[mark]
            text = f"<{tag}>{text}</{tag}>"
            continue
        definition = mark_defs.get(mark)
        if definition and definition.get("_type") == "link" and definition.get("href"):
            href = escape(definition["href"])
            text = f'<a href="{href}" rel="noopener">{text}</a>'
    return text


def _render_children(block) -> str:
    mark_defs = {
        d.get("_key"): d for d in block.get("markDefs") or () if isinstance(d, dict)
    }
    return "".join(
        _render_span(child, mark_defs)
        for child in block.get("children") or ()
        if isinstance(child, dict) and child.get("_type") == "span"
    )


def portable_text(blocks: Any) -> Markup:
    if not blocks:
        return Markup("")
    if isinstance(blocks, str):
        return Markup("<p>{}</p>").format(blocks)

    html: List[str] = []
    open_list = None

    for block in blocks if isinstance(blocks, Iterable) else ():
        if not isinstance(block, dict) or block.get("_type") != "block":
            continue

        list_tag = LIST_TAGS.get(block.get("listItem"))
        if open_list and open_list != list_tag:
            html.append(f"</{open_list}>")
            open_list = None
        if list_tag:
            if not open_list:
                html.append(f"<{list_tag}>")
                open_list = list_tag
            html.append(f"<li>{_render_children(block)}</li>")
            continue

        tag = BLOCK_TAGS.get(block.get("style") or "normal", "p")
        html.append(f"<{tag}>{_render_children(block)}</{tag}>")

    if open_list:
        html.append(f"</{open_list}>")

    return Markup("".join(html))
