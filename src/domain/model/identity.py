"""Identifier allocation for id-keyed collections."""

from collections.abc import Iterable


def next_id(existing_ids: Iterable[int]) -> int:
    """Return an id strictly greater than every id already issued.

    Computed from the collection itself, so numbering continues correctly
    after a reload. Ids are increasing but not guaranteed contiguous.
    """
    return max(existing_ids, default=0) + 1
