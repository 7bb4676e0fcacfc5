"""Task Sampler Engine

Selects the next exercise from a multi-deck corpus. Fairness is enforced at
two nested levels plus a recency filter:

1. Deck rotation - decks are visited in a cyclic shuffled order, empty decks
   are skipped, so no deck starves.
2. Task rotation - each deck walks a shuffled permutation of its tasks and
   reshuffles only after every task has been drawn once.
3. Recency window - recently returned ids are rejected and the rotation
   advances, with a bounded number of attempts.
"""
import random
from collections import deque
from typing import Iterable

from core.config import settings
from core.errors import AppError, Ok, Result, empty_corpus, raise_result
from core.logging import sampler_logger
from models.deck import Corpus, CorpusSignature, Task

log = sampler_logger()


class RotationQueue:
    """Cyclic permutation of 0..size-1 read through a cursor.

    With reshuffle=True the order is replaced by a fresh Fisher-Yates
    permutation every time a full cycle has been consumed; otherwise the
    initial order repeats forever.
    """

    __slots__ = ("_size", "_order", "_cursor", "_rng", "_reshuffle")

    def __init__(self, size: int, rng: random.Random, *, reshuffle: bool = True):
        self._size = size
        self._rng = rng
        self._reshuffle = reshuffle
        self._order = self._permutation()
        self._cursor = 0

    def _permutation(self) -> list[int]:
        order = list(range(self._size))
        self._rng.shuffle(order)
        return order

    def __len__(self) -> int:
        return self._size

    @property
    def order(self) -> tuple[int, ...]:
        return tuple(self._order)

    @property
    def remaining(self) -> int:
        """Indices left before the current cycle completes."""
        return self._size - self._cursor

    def next(self) -> int:
        if self._size == 0:
            raise IndexError("next() on empty rotation")
        if self._cursor >= self._size:
            if self._reshuffle:
                self._order = self._permutation()
            self._cursor = 0
        index = self._order[self._cursor]
        self._cursor += 1
        return index


class RecencyWindow:
    """Bounded FIFO of recently returned task ids.

    A counter keyed by id gives O(1) membership even when the same id sits
    in the FIFO more than once; the sequence number of each id's latest push
    answers "returned within the last n picks".
    """

    __slots__ = ("_capacity", "_ids", "_counts", "_last_seen", "_sequence")

    def __init__(self, capacity: int, seed: Iterable[str] = ()):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._ids: deque[str] = deque()
        self._counts: dict[str, int] = {}
        self._last_seen: dict[str, int] = {}
        self._sequence = 0
        for task_id in seed:
            self.push(task_id)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, task_id: str) -> bool:
        return task_id in self._counts

    def contains(self, task_id: str, within: int | None = None) -> bool:
        """Membership, optionally restricted to the last `within` pushes."""
        if task_id not in self:
            return False
        if within is None:
            return True
        return self._sequence - self._last_seen[task_id] < within

    def push(self, task_id: str) -> None:
        self._sequence += 1
        self._ids.append(task_id)
        self._counts[task_id] = self._counts.get(task_id, 0) + 1
        self._last_seen[task_id] = self._sequence
        while len(self._ids) > self._capacity:
            self._evict()

    def _evict(self) -> None:
        oldest = self._ids.popleft()
        remaining = self._counts[oldest] - 1
        if remaining:
            self._counts[oldest] = remaining
        else:
            del self._counts[oldest]
            del self._last_seen[oldest]

    def clear(self) -> None:
        self._ids.clear()
        self._counts.clear()
        self._last_seen.clear()

    def snapshot(self) -> list[str]:
        """Ids oldest first, ready to be persisted and fed back as a seed."""
        return list(self._ids)


class Sampler:
    """Round-robin task selection with a recency filter.

    Not thread-safe: the host must call pick_next from a single thread.
    """

    __slots__ = ("_rng", "_recency", "_signature", "_deck_rotation", "_task_rotations")

    def __init__(
        self,
        recency_capacity: int | None = None,
        recent_ids: Iterable[str] | None = None,
        rng: random.Random | None = None,
    ):
        capacity = settings.RECENCY_CAPACITY if recency_capacity is None else recency_capacity
        self._rng = rng or random.Random()
        self._recency = RecencyWindow(capacity, recent_ids or ())
        self._signature: CorpusSignature | None = None
        self._deck_rotation = RotationQueue(0, self._rng, reshuffle=False)
        self._task_rotations: list[RotationQueue] = []

    @property
    def recency(self) -> RecencyWindow:
        return self._recency

    def recent_ids(self) -> list[str]:
        """Current recency FIFO contents, oldest first."""
        return self._recency.snapshot()

    def seed_recent(self, task_ids: Iterable[str]) -> None:
        """Replace the recency FIFO, e.g. with ids persisted by the host."""
        self._recency.clear()
        for task_id in task_ids:
            self._recency.push(task_id)
        log.debug("recency_seeded", size=len(self._recency))

    def pick_next(self, corpus: Corpus) -> Task:
        """Select the next task.

        Raises:
            EmptyCorpusError: no deck holds any task.
        """
        return raise_result(self.pick_next_result(corpus))

    def pick_next_result(self, corpus: Corpus) -> Result[Task, AppError]:
        """Select the next task with Result type for typed error handling.

        Returns:
            Ok(Task) on success
            Err(AppError) with E5030_EMPTY_CORPUS if there is nothing to pick
        """
        self._ensure_state(corpus)

        total = corpus.task_count
        if total == 0:
            return empty_corpus(len(corpus.decks), origin="sampler")

        # A window as large as the corpus would reject every candidate
        window = min(self._recency.capacity, total - 1)
        max_attempts = 2 * total

        for attempt in range(max_attempts):
            candidate = self._next_candidate(corpus)
            if window <= 0 or not self._recency.contains(candidate.id, within=window):
                break
        else:
            log.debug("recency_filter_bypassed", task_id=candidate.id, attempts=max_attempts)

        self._recency.push(candidate.id)
        log.debug("task_picked", task_id=candidate.id, attempts=attempt + 1)
        return Ok(candidate)

    def _next_candidate(self, corpus: Corpus) -> Task:
        """Advance the deck rotation to a non-empty deck and draw its next task."""
        for _ in range(len(self._deck_rotation)):
            deck_index = self._deck_rotation.next()
            rotation = self._task_rotations[deck_index]
            if len(rotation):
                return corpus.decks[deck_index].tasks[rotation.next()]
        raise RuntimeError("no non-empty deck in rotation")

    def _ensure_state(self, corpus: Corpus) -> None:
        signature = corpus.signature()
        if signature == self._signature:
            return

        first_build = self._signature is None
        self._signature = signature
        self._deck_rotation = RotationQueue(len(corpus.decks), self._rng, reshuffle=False)
        self._task_rotations = [RotationQueue(len(d.tasks), self._rng) for d in corpus.decks]

        # Seeded history survives the first build only
        if not first_build:
            self._recency.clear()

        log.info(
            "sampler_state_rebuilt",
            decks=len(corpus.decks),
            tasks=corpus.task_count,
            recency_kept=len(self._recency),
        )
