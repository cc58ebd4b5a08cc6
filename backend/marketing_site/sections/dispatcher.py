# marketing_site/sections/dispatcher.py
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Optional

from flask import current_app, render_template
from markupsafe import Markup

from .dividers import background_of
from .registry import get_section_type
from .styles import background_style


def is_hidden(type_tag: str) -> bool:
    return type_tag in current_app.config.get("HIDDEN_SECTION_TYPES", ())


def render_section(
    section: Optional[Mapping[str, Any]],
    *,
    document_id: Optional[str] = None,
    section_key: Optional[str] = None,
    **context: Any,
) -> Optional[Markup]:
    """
    Render one section through the template registered for its type.

    Returns None for empty sections, unknown types and hidden types.
    Template errors are not caught here.
    """
    if not section or not section.get("_type"):
        return None

    type_tag = section["_type"]
    section_type = get_section_type(type_tag)

    if section_type is None:
        if current_app.debug or current_app.testing:
            current_app.logger.warning("Unknown section type: %s", type_tag)
        return None

    if is_hidden(type_tag):
        return None

    extra = {name: context.get(name) for name in section_type.context}

    html = render_template(
        section_type.template,
        data=MappingProxyType(dict(section)),
        document_id=document_id,
        section_key=section_key or section.get("_key"),
        background=background_style(background_of(section)),
        **extra,
    )
    return Markup(html)
