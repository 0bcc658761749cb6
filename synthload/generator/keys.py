"""
Composite key derivation and collision resolution.

After a row is synthesized its composite key is derived in declared key order
and looked up in the store. While a row with that key exists, only the table's
mutable key field is re-sampled; every other field, including correlated
derived fields, is left as generated. The row is then written with
insert-if-absent so that a concurrent writer that claimed the same key in the
meantime is never overwritten: the write is counted as skipped instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from synthload.domain.schema import TableDescriptor
from synthload.errors import KeyResolutionError
from synthload.infrastructure.store import Key, TableStore, WriteMode, WriteOutcome
from synthload.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 10_000


@dataclass(frozen=True)
class Resolution:
    key: Key
    outcome: WriteOutcome
    collisions: int


class KeyResolver:
    """
    Resolves key collisions for one table.

    Parameters
    ----------
    store : TableStore
        Store used for existence checks and the final write.
    descriptor : TableDescriptor
        Table whose `mutable_key_field` is re-sampled on collision.
    regenerate : Callable[[], Any]
        Produces a fresh value for the mutable key field.
    max_attempts : int
        Existence checks allowed per row. The mutable field's domain is large
        relative to any realistic load, so exhausting this signals a broken
        generator rather than a full table.
    """

    def __init__(
        self,
        store: TableStore,
        descriptor: TableDescriptor,
        regenerate: Callable[[], Any],
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if descriptor.mutable_key_field is None:
            raise ValueError(f"{descriptor.name} declares no mutable key field")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.store = store
        self.descriptor = descriptor
        self.regenerate = regenerate
        self.max_attempts = max_attempts

    def derive_key(self, row: Dict[str, Any]) -> Key:
        return self.descriptor.key_of(row)

    def resolve(self, row: Dict[str, Any]) -> Tuple[Key, int]:
        """
        Mutate `row` until its key is free; return the key and the number of collisions.
        """
        field_name = self.descriptor.mutable_key_field
        key = self.derive_key(row)
        for attempt in range(self.max_attempts):
            if self.store.get(self.descriptor, key) is None:
                if attempt:
                    log.debug(
                        "Key collision resolved",
                        extra={"table": self.descriptor.name, "collisions": attempt},
                    )
                return key, attempt
            row[field_name] = self.regenerate()
            key = self.derive_key(row)
        raise KeyResolutionError(self.descriptor.name, self.max_attempts)

    def resolve_and_write(
        self, row: Dict[str, Any], mode: WriteMode = WriteMode.INSERT_IF_ABSENT
    ) -> Resolution:
        key, collisions = self.resolve(row)
        outcome = self.store.write(self.descriptor, row, mode)
        if outcome is WriteOutcome.SKIPPED_DUPLICATE:
            log.info(
                "Key claimed by another writer, row skipped",
                extra={"table": self.descriptor.name, "key": list(key)},
            )
        return Resolution(key=key, outcome=outcome, collisions=collisions)


__all__ = ["DEFAULT_MAX_ATTEMPTS", "KeyResolver", "Resolution"]
