"""
wordrng.sampling.sequence

Choice, sampling and shuffling over sequences.

Design:
- choice draws WITH replacement; sample draws WITHOUT replacement.
- Every index comes from the BoundedSampler, so no modulo bias.
- Async variants move the whole synchronous call onto an executor. The
  only suspension point is that dispatch; cancellation is checked once,
  before it. A running shuffle cannot be interrupted.
"""

import asyncio
import functools
import threading
from concurrent.futures import Executor
from typing import Any, Iterable, List, MutableSequence, Optional, Union

from wordrng.core.exceptions import InvalidArgumentError
from wordrng.core.validation import (
    validate_count,
    validate_mutable_sequence,
    validate_non_empty_sequence,
)
from .bounded import BoundedSampler


def _materialise(items: Iterable, name: str = "items") -> List[Any]:
    """Copy items into a list once, rejecting None and empty input."""
    if items is None:
        raise InvalidArgumentError(f"{name} must not be None")
    pool = list(items)
    validate_non_empty_sequence(pool, name)
    return pool


class SequenceOps:
    """Sequence operations driven by a BoundedSampler."""

    def __init__(self, bounded: BoundedSampler):
        self._bounded = bounded

    # ------------------------------------------------------------------
    # Synchronous API
    # ------------------------------------------------------------------

    def choice(self, items: Iterable, select: Optional[int] = None) -> Any:
        """Pick elements uniformly, with replacement.

        Args:
            items: Non-empty sequence or iterable.
            select: If None, return a single element. Otherwise return a
                list of `select` independent picks (1 <= select <= n);
                duplicates are possible. Use sample() for distinct picks.

        Raises:
            InvalidArgumentError: Empty/None items or select outside [1, n].
        """
        pool = _materialise(items)
        if select is not None:
            validate_count(select, len(pool), "select")
        return self._choice(pool, select)

    def sample(self, items: Iterable, k: int) -> List[Any]:
        """Pick k elements distinct by position (reservoir, Algorithm R).

        Each element is selected with probability exactly k/n. The output
        order follows the reservoir overwrites, not the input order. When
        k == n the input is returned as a new list with no draws.

        Raises:
            InvalidArgumentError: Empty/None items or k outside [1, n].
        """
        pool = _materialise(items)
        validate_count(k, len(pool), "k")
        return self._sample(pool, k)

    def shuffle(self, items: Iterable) -> List[Any]:
        """Return a uniformly permuted copy; the input is left untouched."""
        pool = _materialise(items)
        self._shuffle(pool)
        return pool

    def shuffle_in_place(self, items: MutableSequence) -> None:
        """Permute a mutable sequence in place (lists, 1-D numpy arrays).

        Raises:
            InvalidArgumentError: Empty or None items, an immutable
                sequence, or an array that is not 1-D and writable. Nothing
                is drawn in that case.
        """
        validate_mutable_sequence(items, "items")
        self._shuffle(items)

    # ------------------------------------------------------------------
    # Async API
    # ------------------------------------------------------------------

    async def choice_async(
        self,
        items: Iterable,
        select: Optional[int] = None,
        *,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ) -> Any:
        """Async choice(). Validation happens before dispatch."""
        pool = _materialise(items)
        if select is not None:
            validate_count(select, len(pool), "select")
        return await self._dispatch(self._choice, pool, select,
                                    cancel_event=cancel_event, executor=executor)

    async def sample_async(
        self,
        items: Iterable,
        k: int,
        *,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ) -> List[Any]:
        """Async sample(). Validation happens before dispatch."""
        pool = _materialise(items)
        validate_count(k, len(pool), "k")
        return await self._dispatch(self._sample, pool, k,
                                    cancel_event=cancel_event, executor=executor)

    async def shuffle_async(
        self,
        items: Iterable,
        *,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ) -> List[Any]:
        """Async shuffle(). Returns a new permuted list."""
        pool = _materialise(items)
        await self._dispatch(self._shuffle, pool,
                             cancel_event=cancel_event, executor=executor)
        return pool

    async def shuffle_in_place_async(
        self,
        items: MutableSequence,
        *,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        """Async shuffle_in_place(). Validation happens before dispatch."""
        validate_mutable_sequence(items, "items")
        await self._dispatch(self._shuffle, items,
                             cancel_event=cancel_event, executor=executor)

    @staticmethod
    async def _dispatch(
        fn,
        *args,
        cancel_event: Optional[threading.Event] = None,
        executor: Optional[Executor] = None,
    ):
        if cancel_event is not None and cancel_event.is_set():
            raise asyncio.CancelledError("Cancelled before dispatch")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor, functools.partial(fn, *args))

    # ------------------------------------------------------------------
    # Algorithms (inputs already validated)
    # ------------------------------------------------------------------

    def _choice(self, pool: List[Any], select: Optional[int]) -> Any:
        n = len(pool)
        if select is None:
            return pool[self._bounded.index(n)]
        return [pool[self._bounded.index(n)] for _ in range(select)]

    def _sample(self, pool: List[Any], k: int) -> List[Any]:
        n = len(pool)
        if k == n:
            return list(pool)

        reservoir = pool[:k]
        for i in range(k, n):
            # j uniform in [0, i]
            j = self._bounded.index(i + 1)
            if j < k:
                reservoir[j] = pool[i]
        return reservoir

    def _shuffle(self, items: Union[List[Any], MutableSequence]) -> None:
        # Index 0 is never the swap target position i.
        for i in range(len(items) - 1, 0, -1):
            j = self._bounded.index(i + 1)
            items[i], items[j] = items[j], items[i]
