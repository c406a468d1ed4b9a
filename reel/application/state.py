"""Client-side state containers.

``ThreadState`` holds the local copy of one collection (the reviews of a
title, the comments of a post) and is the only place use cases write
to. ``InFlightGuard`` keeps at most one mutation running per entity.
"""

from collections.abc import Callable, Hashable, Iterator, Sequence
from contextlib import contextmanager
from typing import Generic, TypeVar

import logfire

from reel.domain.model import VotableEntity
from reel.domain.service import find

T = TypeVar("T")

Listener = Callable[[tuple], None]


class ThreadState(Generic[T]):
    """Local collection for one parent, updated reducer-style.

    Every change goes through ``apply``, which hands the current tuple to
    a pure function and stores its result. Once the owner is gone
    (``close``), changes are dropped: a response that arrives after the
    view was torn down never touches state.
    """

    def __init__(self, items: Sequence[T] = (), name: str = "thread") -> None:
        self.name = name
        self._items: tuple[T, ...] = tuple(items)
        self._listeners: list[Listener] = []
        self._closed = False

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> tuple[T, ...]:
        """Capture the collection for a later ``restore``."""
        return self._items

    def apply(self, fn: Callable[[tuple[T, ...]], Sequence[T]]) -> bool:
        """Replace the collection with ``fn(items)``.

        Args:
            fn: Pure function from the current collection to the next one

        Returns:
            False if the state is closed and the change was dropped
        """
        if self._closed:
            logfire.info("Dropped update to closed state", state=self.name)
            return False

        self._items = tuple(fn(self._items))
        for listener in list(self._listeners):
            listener(self._items)
        return True

    def restore(self, snapshot: Sequence[T]) -> bool:
        return self.apply(lambda _: snapshot)

    def replace_all(self, items: Sequence[T]) -> bool:
        return self.apply(lambda _: items)

    def find(self, entity_id: str) -> VotableEntity | None:
        """Find a votable entity by id, children included."""
        return find(
            [item for item in self._items if isinstance(item, VotableEntity)],
            entity_id,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Function that unregisters the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Detach the state from its owner; later changes are dropped."""
        self._closed = True
        self._listeners.clear()


class InFlightGuard:
    """Per-key mutual exclusion for mutations.

    A second attempt on a held key is refused, not queued. Different keys
    never block each other.
    """

    def __init__(self) -> None:
        self._held: set[Hashable] = set()

    def try_acquire(self, key: Hashable) -> bool:
        if key in self._held:
            return False
        self._held.add(key)
        return True

    def release(self, key: Hashable) -> None:
        self._held.discard(key)

    def is_held(self, key: Hashable) -> bool:
        return key in self._held

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[bool]:
        """Hold ``key`` for the duration of the block.

        Yields:
            Whether the key was acquired; the block must skip its work
            when it was not
        """
        acquired = self.try_acquire(key)
        try:
            yield acquired
        finally:
            if acquired:
                self.release(key)
