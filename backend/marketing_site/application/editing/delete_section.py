# marketing_site/application/editing/delete_section.py
from typing import Any, Dict

from marketing_site.cms.client import get_client
from marketing_site.editing.patches import build_delete_patch, find_section_index
from marketing_site.exceptions import ConfirmationRequired, SectionNotFound
from .history import record_section_edit
from .snapshot import load_snapshot


def delete_section(
    *,
    document_id: str,
    key: str,
    confirmed: bool,
    actor_id: str,
) -> Dict[str, Any]:
    """
    Remove one section from a page document.

    Edge cases handled:
    - Unconfirmed request: rejected before touching the CMS
    - Key absent from the current snapshot: reported as not found
    - Document changed since the snapshot: the CMS rejects the revision
    """
    if not confirmed:
        raise ConfirmationRequired("Deleting a section must be confirmed")

    document = load_snapshot(document_id)
    sections = document.get("sections") or []

    index = find_section_index(sections, key)
    if index < 0:
        raise SectionNotFound(f"Section {key} not found in document {document_id}")

    get_client().mutate(build_delete_patch(document_id, key, document.get("_rev")))

    record_section_edit(
        action="section.delete",
        document_id=document_id,
        payload={"key": key, "index": index, "type": sections[index].get("_type")},
        actor_id=actor_id,
    )

    return {"changed": True, "key": key, "from_index": index, "to_index": None}
