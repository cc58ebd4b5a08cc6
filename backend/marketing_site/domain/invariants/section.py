from collections import Counter

from marketing_site.exceptions import InvariantViolation


def assert_section_keys(sections):
    """Every section in a page's array must carry a unique _key."""
    keys = [section.get("_key") for section in sections or ()]

    missing = [index for index, key in enumerate(keys) if not key]
    if missing:
        raise InvariantViolation(f"Sections without _key at positions: {missing}")

    duplicates = sorted(key for key, count in Counter(keys).items() if count > 1)
    if duplicates:
        raise InvariantViolation(f"Duplicate section keys: {duplicates}")
