"""Concurrent fan-out over seeds with a shared, locked accumulator.

Each seed runs as its own task. A task that raises is logged and
contributes nothing; the other tasks are unaffected. Results land in the
accumulator in completion order, so when two seeds yield the same item the
copy from the task that finished first is the one kept.
"""

import logging
import random
import threading
from collections.abc import Callable, Hashable, Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Any, Generic, TypeVar

from ytm_innertube.exceptions import CancellationError
from ytm_innertube.models.cancel import CancelToken

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")

DEFAULT_MAX_WORKERS = 8


class ItemCollector(Generic[T]):
    """Append-only list shared by worker threads."""

    __slots__ = ("_items", "_lock")

    def __init__(self) -> None:
        self._items: list[T] = []
        self._lock = threading.Lock()

    def extend(self, items: Iterable[T]) -> None:
        batch = list(items)
        with self._lock:
            self._items.extend(batch)

    def snapshot(self) -> list[T]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def item_id(item: Any) -> Hashable:
    """Default dedupe key: the item's ``id``."""
    return item.id


def dedupe(items: Iterable[T], key: Callable[[T], Hashable] = item_id) -> list[T]:
    """Drop later duplicates, keeping the first occurrence of each key in order."""
    seen: set[Hashable] = set()
    unique: list[T] = []
    for item in items:
        k = key(item)
        if k in seen:
            continue
        seen.add(k)
        unique.append(item)
    return unique


def aggregate(
    seeds: Sequence[S],
    per_seed_query: Callable[[S], Iterable[T]],
    *,
    key: Callable[[T], Hashable] = item_id,
    post_filters: Sequence[Callable[[list[T]], list[T]]] = (),
    shuffle: bool = False,
    max_workers: int | None = None,
    cancel_token: CancelToken | None = None,
    rng: random.Random | None = None,
) -> list[T]:
    """Run ``per_seed_query`` for every seed concurrently and merge the results.

    Args:
        seeds: Inputs of the fan-out, one task each.
        per_seed_query: Produces the items of one seed. May raise.
        key: Dedupe key of an item.
        post_filters: Applied in order after dedupe (and shuffle).
        shuffle: Shuffle the merged items before filtering.
        max_workers: Thread pool size. Defaults to min(len(seeds), 8).
        cancel_token: Abandons the aggregation when set.
        rng: Random source for the shuffle.

    Returns:
        The merged items. Empty if there are no seeds or every task failed.

    Raises:
        CancellationError: If ``cancel_token`` was set before all tasks finished.
    """
    if not seeds:
        return []

    collector: ItemCollector[T] = ItemCollector()

    def run(seed: S) -> None:
        if cancel_token is not None and cancel_token.is_cancelled:
            return
        items = list(per_seed_query(seed))
        if cancel_token is not None and cancel_token.is_cancelled:
            return
        collector.extend(items)

    workers = max_workers or min(len(seeds), DEFAULT_MAX_WORKERS)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures: dict[Future[None], S] = {
            executor.submit(run, seed): seed for seed in seeds
        }
        for future in as_completed(futures):
            if cancel_token is not None and cancel_token.is_cancelled:
                for pending in futures:
                    pending.cancel()
                break
            try:
                future.result()
            except Exception as e:
                logger.warning("Seed %r failed: %s", futures[future], e)

    if cancel_token is not None and cancel_token.is_cancelled:
        raise CancellationError("Aggregation cancelled")

    results = dedupe(collector.snapshot(), key)
    failed = sum(1 for future in futures if future.exception() is not None)
    logger.debug(
        "Aggregated %d item(s) from %d seed(s), %d failed",
        len(results),
        len(seeds),
        failed,
    )

    if shuffle:
        (rng or random).shuffle(results)
    for post_filter in post_filters:
        results = post_filter(results)
    return results
