"""Lazy traversal of continuation chains.

The service occasionally hands back a token it already issued, which would
make a naive ``while token`` loop spin forever. Every chain is therefore
bounded twice: by the set of tokens already followed and by a step cap.
"""

import logging
from collections.abc import Callable, Iterator

from ytm_innertube.models.cancel import CancelToken
from ytm_innertube.models.items import AnyItem
from ytm_innertube.models.pages import Page

logger = logging.getLogger(__name__)

MAX_CONTINUATION_STEPS = 50

FetchNext = Callable[[str], Page]


def iter_pages(
    initial_page: Page,
    fetch_next: FetchNext,
    *,
    max_steps: int = MAX_CONTINUATION_STEPS,
    cancel_token: CancelToken | None = None,
) -> Iterator[Page]:
    """Yield ``initial_page`` and every page reachable from it.

    Stops when the continuation is empty or already followed, after
    ``max_steps`` fetches, or when ``cancel_token`` is set. Errors raised by
    ``fetch_next`` propagate to the consumer.

    Args:
        initial_page: First page, already fetched.
        fetch_next: Fetches the page for a continuation token.
        max_steps: Upper bound on calls to ``fetch_next``.
        cancel_token: Optional token to stop between fetches.

    Yields:
        Pages in order, starting with ``initial_page``.
    """
    yield initial_page

    seen: set[str] = set()
    steps = 0
    continuation = initial_page.continuation
    while continuation:
        if continuation in seen:
            logger.debug(
                "Stopping pagination: continuation repeated after %d step(s)", steps
            )
            return
        if steps >= max_steps:
            logger.debug("Stopping pagination: reached %d step(s)", max_steps)
            return
        if cancel_token is not None and cancel_token.is_cancelled:
            logger.debug("Stopping pagination: cancelled after %d step(s)", steps)
            return

        seen.add(continuation)
        steps += 1
        page = fetch_next(continuation)
        yield page
        continuation = page.continuation

    logger.debug("Pagination finished after %d step(s)", steps)


def paginate(
    initial_page: Page,
    fetch_next: FetchNext,
    *,
    max_steps: int = MAX_CONTINUATION_STEPS,
    cancel_token: CancelToken | None = None,
) -> Iterator[AnyItem]:
    """Yield items across a continuation chain, fetching pages on demand."""
    for page in iter_pages(
        initial_page, fetch_next, max_steps=max_steps, cancel_token=cancel_token
    ):
        yield from page.items


def collect(
    initial_page: Page,
    fetch_next: FetchNext,
    *,
    max_steps: int = MAX_CONTINUATION_STEPS,
    limit: int | None = None,
) -> list[AnyItem]:
    """Materialize a chain into a list, optionally stopping at ``limit`` items."""
    items: list[AnyItem] = []
    for item in paginate(initial_page, fetch_next, max_steps=max_steps):
        items.append(item)
        if limit is not None and len(items) >= limit:
            break
    return items
