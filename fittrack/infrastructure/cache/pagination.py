"""
Paginated search accumulation.

Walks an offset-paginated listing until the server runs out of pages or a
hard cap is hit, then applies client-side text filtering and an optional
supplementary name query.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Generic, Hashable, List, Optional, Sequence, TypeVar

import structlog

T = TypeVar("T")

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results as returned by a page fetcher.

    ``fetched`` is the number of entries upstream returned before any
    adapter-side filtering; ``None`` means ``len(results)``.
    """

    results: Sequence[T] = field(default_factory=tuple)
    has_next: bool = False
    fetched: Optional[int] = None

    @property
    def upstream_size(self) -> int:
        if self.fetched is None:
            return len(self.results)
        return max(self.fetched, len(self.results))


PageFetcher = Callable[[int], Awaitable[Page[T]]]
NameFetcher = Callable[[str], Awaitable[Sequence[T]]]


def entity_id(item: Any) -> Hashable:
    """Identity of an entity: ``item.id`` or ``item["id"]``."""
    if isinstance(item, dict):
        return item["id"]
    return item.id


def matches_text(item: Any, term: str) -> bool:
    """Case-insensitive substring match on name, description or category."""
    if hasattr(item, "matches"):
        return item.matches(term)

    needle = term.lower()
    for attr in ("name", "description", "category"):
        value = item.get(attr) if isinstance(item, dict) else getattr(item, attr, None)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


def merge_by_id(
    primary: Sequence[T],
    extra: Sequence[T],
    id_of: Callable[[T], Hashable] = entity_id,
) -> List[T]:
    """Append ``extra`` to ``primary`` skipping ids already present."""
    merged = list(primary)
    seen = {id_of(item) for item in merged}
    for item in extra:
        key = id_of(item)
        if key not in seen:
            seen.add(key)
            merged.append(item)
    return merged


async def accumulate_pages(
    page_fetcher: PageFetcher,
    page_size: int,
    hard_cap: int,
    id_of: Callable[[Any], Hashable] = entity_id,
) -> List[Any]:
    """Fetch pages by offset and accumulate distinct entities.

    Stops when the server reports no next page, returns an empty page,
    returns a page with nothing new, or ``hard_cap`` entries have been
    fetched. Every upstream entry counts toward the cap, duplicates and
    filtered-out entries included. Order is server order; duplicates
    across pages keep their first occurrence.

    Args:
        page_fetcher: ``async (offset) -> Page``
        page_size: Offset increment between pages
        hard_cap: Maximum number of entries to fetch

    Returns:
        At most ``hard_cap`` distinct entities

    Raises:
        Whatever ``page_fetcher`` raises; partial results are discarded
    """
    accumulated: List[Any] = []
    seen: set = set()
    offset = 0
    pages = 0
    fetched = 0

    while fetched < hard_cap:
        page = await page_fetcher(offset)
        pages += 1
        if not page.upstream_size:
            break
        fetched += page.upstream_size

        added = 0
        for item in page.results:
            key = id_of(item)
            if key in seen:
                continue
            seen.add(key)
            accumulated.append(item)
            added += 1
            if len(accumulated) >= hard_cap:
                break

        if page.results and not added:
            logger.warning("Page repeated earlier results, stopping", offset=offset)
            break
        if not page.has_next:
            break
        offset += page_size

    if fetched >= hard_cap:
        logger.info("Search hard cap reached", hard_cap=hard_cap, pages=pages)
    logger.debug("Pages accumulated", pages=pages, results=len(accumulated))
    return accumulated


async def paginated_search(
    query: Optional[str],
    page_fetcher: PageFetcher,
    page_size: int,
    hard_cap: int,
    min_results: int,
    name_fetcher: Optional[NameFetcher] = None,
    id_of: Callable[[Any], Hashable] = entity_id,
    matcher: Callable[[Any, str], bool] = matches_text,
) -> List[Any]:
    """Accumulate pages, filter by text and top up sparse results.

    The supplementary name query runs only when a non-empty query leaves
    fewer than ``min_results`` matches. Its results are merged as returned
    (already matched upstream), first seen wins.
    """
    results = await accumulate_pages(page_fetcher, page_size, hard_cap, id_of)

    term = (query or "").strip()
    if not term:
        return results

    results = [item for item in results if matcher(item, term)]

    if len(results) < min_results and name_fetcher is not None:
        logger.debug(
            "Sparse search, running name query",
            query=term,
            matches=len(results),
            min_results=min_results,
        )
        extra = await name_fetcher(term)
        results = merge_by_id(results, extra, id_of)

    return results
