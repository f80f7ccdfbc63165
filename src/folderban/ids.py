"""Instance IDs and title ordering."""

import locale
import uuid
from functools import cmp_to_key


def new_instance_id() -> str:
    """Generate an ephemeral in-memory ID.

    These IDs are regenerated on every load and never identify a file.
    """
    return uuid.uuid4().hex


def compare_titles(left: str, right: str) -> int:
    """Compare two titles with the current locale's collation.

    Returns -1 if left < right, 0 if equal, 1 if left > right.
    """
    result = locale.strcoll(left, right)
    if result < 0:
        return -1
    if result > 0:
        return 1
    return 0


title_key = cmp_to_key(compare_titles)
