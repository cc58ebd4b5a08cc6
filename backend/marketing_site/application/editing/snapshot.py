# marketing_site/application/editing/snapshot.py
from typing import Any, Dict

from marketing_site.cms.client import get_client
from marketing_site.domain.invariants.section import assert_section_keys
from marketing_site.exceptions import DocumentNotFound
from marketing_site.utils.optimistic_lock import enforce_optimistic_lock


def load_snapshot(document_id: str) -> Dict[str, Any]:
    """
    Fetch the current revision of a page document for editing.

    Every editing action starts from a fresh snapshot; nothing is cached.
    """
    document = get_client().get_document(document_id)
    if not document:
        raise DocumentNotFound(f"Document {document_id} not found")

    enforce_optimistic_lock(document)
    assert_section_keys(document.get("sections") or [])
    return document
