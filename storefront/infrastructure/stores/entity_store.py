# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Thread-safe in-memory CRUD store with server-assigned integer ids."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from threading import Lock
from typing import Any, Generic, Protocol, TypeVar

from storefront.shared.logging import logger


class _HasId(Protocol):
    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=_HasId)


class IdAllocator:
    """Monotonic increment-and-fetch counter guarded by its own lock."""

    def __init__(self, start: int) -> None:
        self._next = start
        self._lock = Lock()

    def allocate(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value


class EntityStore(Generic[T]):  # noqa: UP046
    """Concurrent map from id to a frozen dataclass entity.

    Entities are never mutated in place: ``add`` and ``update`` build a new
    value with the forced id and publish it with a single locked write.
    The id allocator has a separate lock so two racing ``add`` calls can
    never be handed the same id.
    """

    name = "entities"

    def __init__(self, seed: Iterable[T] = ()) -> None:
        self._lock = Lock()
        self._items: dict[int, T] = {}
        for entity in seed:
            if entity.id in self._items:
                raise ValueError(f"duplicate seed id {entity.id} in {self.name} store")
            self._items[entity.id] = entity
        self._ids = IdAllocator(max(self._items, default=0) + 1)
        logger.info(f"store.init: ok (store={self.name}, n={len(self._items)})")

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def get_all(self) -> list[T]:
        return self._select(lambda _: True)

    def get_by_id(self, entity_id: int) -> T | None:
        with self._lock:
            return self._items.get(entity_id)

    def add(self, entity: T) -> T:
        stored = self._with_id(entity, self._ids.allocate())
        with self._lock:
            self._items[stored.id] = stored
        logger.info(f"store.add: ok (store={self.name}, id={stored.id})")
        return stored

    def update(self, entity_id: int, entity: T) -> T | None:
        updated = self._with_id(entity, entity_id)
        with self._lock:
            found = entity_id in self._items
            if found:
                self._items[entity_id] = updated
        if not found:
            logger.warning(f"store.update: not_found (store={self.name}, id={entity_id})")
            return None
        logger.info(f"store.update: ok (store={self.name}, id={entity_id})")
        return updated

    def delete(self, entity_id: int) -> T | None:
        with self._lock:
            deleted = self._items.pop(entity_id, None)
        if deleted is None:
            logger.warning(f"store.delete: not_found (store={self.name}, id={entity_id})")
        else:
            logger.info(f"store.delete: ok (store={self.name}, id={entity_id})")
        return deleted

    def _select(
        self,
        predicate: Callable[[T], bool],
        key: Callable[[T], Any] | None = None,
    ) -> list[T]:
        with self._lock:
            snapshot = list(self._items.values())
        matched = [item for item in snapshot if predicate(item)]
        matched.sort(key=key or (lambda item: item.id))
        return matched

    @staticmethod
    def _with_id(entity: T, entity_id: int) -> T:
        return dataclasses.replace(entity, id=entity_id)  # type: ignore[type-var]


__all__ = ["EntityStore", "IdAllocator"]
