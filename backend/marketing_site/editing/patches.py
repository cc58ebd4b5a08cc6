# marketing_site/editing/patches.py
"""
Builders for the patch mutations the section manager sends to the CMS.

The builders are pure: they read a snapshot of the ``sections`` array and
return mutation dicts, or None when the request would not change anything.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from marketing_site.sections.composer import key_path

UP = "up"
DOWN = "down"
DIRECTIONS = {UP: -1, DOWN: 1}


def find_section_index(sections: Sequence[Mapping[str, Any]], key: str) -> int:
    for index, section in enumerate(sections or ()):
        if section.get("_key") == key:
            return index
    return -1


def _patch(document_id: str, revision: Optional[str], **operations) -> Dict[str, Any]:
    patch: Dict[str, Any] = {"id": document_id}
    if revision:
        patch["ifRevisionID"] = revision
    patch.update(operations)
    return {"patch": patch}


def build_delete_patch(document_id: str, key: str, revision: Optional[str] = None) -> List[Dict[str, Any]]:
    return [_patch(document_id, revision, unset=[key_path(key)])]


def target_index(sections: Sequence[Mapping[str, Any]], key: str, direction: str) -> Optional[int]:
    """
    Index the section ends up next to, or None when the move is a no-op.
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid direction: {direction}")

    index = find_section_index(sections, key)
    if index < 0:
        return None

    target = index + DIRECTIONS[direction]
    if target < 0 or target >= len(sections):
        return None
    return target


def build_move_patch(
    document_id: str,
    sections: Sequence[Mapping[str, Any]],
    key: str,
    direction: str,
    revision: Optional[str] = None,
) -> Optional[List[Dict[str, Any]]]:
    """
    Remove the entry and re-insert it before (up) or after (down) its
    current neighbour. Both mutations go in one transaction; only the first
    carries the revision guard.
    """
    target = target_index(sections, key, direction)
    if target is None:
        return None

    section = dict(sections[find_section_index(sections, key)])
    sibling_key = sections[target]["_key"]
    position = "before" if direction == UP else "after"

    return [
        _patch(document_id, revision, unset=[key_path(key)]),
        _patch(
            document_id,
            None,
            insert={position: key_path(sibling_key), "items": [section]},
        ),
    ]
