"""
Pagination state for the Pocket ``/v3/get`` endpoint.

The fetch loop feeds each parsed page into ``advance`` and stops once the
state reaches DONE. Pages are merged into a single dict keyed by item id;
successive states share that dict.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

# Pocket API default page size; the short-page check below depends on it
PAGE_SIZE = 30


class FetchState(Enum):
    FETCHING = "fetching"
    ACCUMULATING = "accumulating"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class PaginationState:
    offset: int = 0
    items: dict = field(default_factory=dict)
    state: FetchState = FetchState.FETCHING
    pages: int = 0
    last_batch: int = 0
    page_size: int = PAGE_SIZE

    @property
    def finished(self):
        return self.state in (FetchState.DONE, FetchState.FAILED)


def advance(current: PaginationState, page) -> PaginationState:
    """Apply one parsed page to the state.

    A page without a ``list`` ends the fetch without merging. Otherwise the
    page is merged, and a page shorter than ``page_size`` ends the fetch;
    a full page moves the offset forward by ``page_size``.

    Raises ValueError for a ``list`` that is not a mapping of item id to item.
    """
    if current.finished:
        raise ValueError(f"Cannot advance pagination in state {current.state.name}")

    batch = page.get("list") if isinstance(page, dict) else None
    if not batch:
        return replace(current, state=FetchState.DONE, pages=current.pages + 1, last_batch=0)
    if not isinstance(batch, dict):
        raise ValueError(f"Expected 'list' to map item ids to items, got {type(batch).__name__}")

    current.items.update(batch)
    accumulating = replace(
        current, state=FetchState.ACCUMULATING, pages=current.pages + 1, last_batch=len(batch)
    )

    if len(batch) < current.page_size:
        return replace(accumulating, state=FetchState.DONE)

    return replace(accumulating, offset=current.offset + current.page_size, state=FetchState.FETCHING)


def fail(current: PaginationState) -> PaginationState:
    return replace(current, state=FetchState.FAILED)
