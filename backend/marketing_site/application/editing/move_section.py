# marketing_site/application/editing/move_section.py
from typing import Any, Dict

from marketing_site.cms.client import get_client
from marketing_site.editing.patches import (
    UP,
    build_move_patch,
    find_section_index,
    target_index,
)
from marketing_site.exceptions import SectionNotFound
from .history import record_section_edit
from .snapshot import load_snapshot


def move_section(
    *,
    document_id: str,
    key: str,
    direction: str,
    actor_id: str,
) -> Dict[str, Any]:
    """
    Move one section up or down by one position.

    Responsibilities:
    - Fresh snapshot before computing the patch
    - No mutation at the edges of the array
    - Revision-guarded transaction (unset + insert)
    - Audit logging, best effort once the CMS has applied the edit
    """
    document = load_snapshot(document_id)
    sections = document.get("sections") or []

    index = find_section_index(sections, key)
    if index < 0:
        raise SectionNotFound(f"Section {key} not found in document {document_id}")

    mutations = build_move_patch(document_id, sections, key, direction, document.get("_rev"))
    if mutations is None:
        return {"changed": False, "key": key, "from_index": index, "to_index": index}

    new_index = target_index(sections, key, direction)
    get_client().mutate(mutations)

    record_section_edit(
        action="section.move_up" if direction == UP else "section.move_down",
        document_id=document_id,
        payload={"key": key, "from_index": index, "to_index": new_index},
        actor_id=actor_id,
    )

    return {"changed": True, "key": key, "from_index": index, "to_index": new_index}
