# marketing_site/sections/composer.py
from __future__ import annotations

from typing import Any, List, Mapping, NamedTuple, Optional, Sequence
from urllib.parse import quote

from flask import current_app, render_template
from markupsafe import Markup

from .dispatcher import render_section
from .dividers import DividerDecision, resolve_divider
from .styles import DividerStyle


class ComposedSection(NamedTuple):
    key: Optional[str]
    type: str
    html: Optional[Markup]
    divider: Optional[DividerDecision]
    data_attribute: Optional[str]
    failed: bool = False


def key_path(key: str) -> str:
    return f'sections[_key=="{key}"]'


def data_attribute(document_id: str, document_type: str, path: str) -> str:
    """
    Encode a visual-editing reference (document, type, field path) in the
    ``key=value;...`` form the studio overlay reads from ``data-sanity``.
    """
    config = current_app.config
    parts = [
        ("id", document_id),
        ("type", document_type),
        ("path", path),
        ("base", quote(config.get("SANITY_STUDIO_URL") or "", safe="")),
        ("projectId", config.get("SANITY_PROJECT_ID") or ""),
        ("dataset", config.get("SANITY_DATASET") or ""),
    ]
    return ";".join(f"{name}={value}" for name, value in parts if value)


def divider_after(sections, index) -> Optional[DividerDecision]:
    """
    Divider drawn below ``sections[index]``.

    The neighbour is the next raw entry, even one that will not render.
    Shared by the page renderer and the page JSON API.
    """
    if index >= len(sections) - 1:
        return None
    decision = resolve_divider(sections[index], sections[index + 1])
    if decision.style is DividerStyle.NONE:
        return None
    return decision


def compose_sections(
    sections: Optional[Sequence[Mapping[str, Any]]],
    *,
    document_id: Optional[str] = None,
    document_type: Optional[str] = None,
    editing: bool = False,
    **context: Any,
) -> List[ComposedSection]:
    if not sections:
        return []

    annotate = bool(editing and document_id and document_type)
    composed: List[ComposedSection] = []

    for index, section in enumerate(sections):
        if not section or not section.get("_type"):
            continue

        key = section.get("_key")
        failed = False

        try:
            html = render_section(
                section,
                document_id=document_id if annotate else None,
                section_key=key,
                **context,
            )
        except Exception:
            current_app.logger.exception(
                "Section %s (%s) failed to render", key, section["_type"]
            )
            failed = True
            html = None
            if annotate:
                html = Markup(
                    render_template("sections/_error.html", section_type=section["_type"])
                )

        divider = divider_after(sections, index)

        attribute = None
        if annotate and key:
            attribute = data_attribute(document_id, document_type, key_path(key))

        composed.append(
            ComposedSection(
                key=key,
                type=section["_type"],
                html=html,
                divider=divider,
                data_attribute=attribute,
                failed=failed,
            )
        )

    return composed


def render_sections(
    sections,
    *,
    document_id=None,
    document_type=None,
    editing=False,
    **context,
) -> Markup:
    """Compose ``sections`` and render them inside the page container template."""
    composed = compose_sections(
        sections,
        document_id=document_id,
        document_type=document_type,
        editing=editing,
        **context,
    )
    annotate = bool(editing and document_id and document_type)
    container_attribute = (
        data_attribute(document_id, document_type, "sections") if annotate else None
    )
    return Markup(
        render_template(
            "sections/_container.html",
            composed=composed,
            editing=annotate,
            document_id=document_id,
            container_attribute=container_attribute,
        )
    )
