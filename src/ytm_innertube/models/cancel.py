"""Cancellation token for fan-out operations."""

import threading


class CancelToken:
    """Thread-safe cancellation token using threading.Event.

    Shared between a caller and the workers of one aggregation. Tokens are
    single-use: once cancelled, create a new token for the next operation.

    Example:
        >>> token = CancelToken()
        >>> service.daily_discover(seeds, cancel_token=token)  # worker thread
        >>> token.cancel()  # caller navigated away
    """

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Signal cancellation. Safe to call from any thread."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()
