"""Per-class member registry.

A registry holds the records one class declares, split into visibility
buckets plus a static bucket, and resolves names through its ancestry by
following ``parent`` links. Parent registries are referenced, never copied.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

from classplane.core.logging import get_logger
from classplane.members.errors import DuplicateDefinitionError, FinalizedRegistryError
from classplane.members.models import MemberKind, MemberRecord, Visibility

log = get_logger("members.registry")

_LOOKUP_ORDER = (Visibility.PUBLIC, Visibility.PROTECTED, Visibility.PRIVATE)


class MemberRegistry:
    """Member store for one class.

    ``owner`` is the class object the registry belongs to; records committed
    here carry it as their ``origin``. The registry starts mutable and is
    frozen exactly once by ``finalize()``.
    """

    def __init__(self, owner: Any, name: str, parent: MemberRegistry | None = None) -> None:
        self.owner = owner
        self.name = name
        self.parent = parent
        self._buckets: dict[Visibility, dict[str, MemberRecord]] = {v: {} for v in Visibility}
        self._statics: dict[str, MemberRecord] = {}
        self._finalized = False
        self.static_values: dict[str, Any] = {}
        # resolved tables the runtime attaches to a finalized class
        self.runtime: dict[str, Any] = {}

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "building"
        return f"<MemberRegistry {self.name} ({state})>"

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def ancestry(self) -> Iterator[MemberRegistry]:
        """Yield this registry, then each ancestor outward to the root."""
        registry: MemberRegistry | None = self
        while registry is not None:
            yield registry
            registry = registry.parent

    def own(self, name: str) -> MemberRecord | None:
        """Record for ``name`` declared by this class itself, any visibility."""
        for visibility in _LOOKUP_ORDER:
            record = self._buckets[visibility].get(name)
            if record is not None:
                return record
        return self._statics.get(name)

    def lookup(self, name: str, from_class: Any = None) -> MemberRecord | None:
        """Resolve ``name`` as seen from ``from_class`` (defaults to the owner).

        Own buckets are searched first, then each ancestor outward. Private
        records only resolve when ``from_class`` is the class that declared
        them. Absence returns None.
        """
        viewer = self.owner if from_class is None else from_class
        for registry in self.ancestry():
            record = registry.own(name)
            if record is None:
                continue
            if record.visibility is Visibility.PRIVATE and record.origin is not viewer:
                continue
            return record
        return None

    def commit(self, record: MemberRecord, *, merge: bool = False) -> None:
        """Insert ``record``, shadowing whatever this class held under its name.

        ``merge`` marks a record that completes an accessor pair already
        declared by this class (a getter joined by its setter, or the reverse).

        Raises:
            FinalizedRegistryError: The class definition is complete.
            DuplicateDefinitionError: Same name and visibility already declared
                by this class and ``record`` is not an override.
        """
        if self._finalized:
            raise FinalizedRegistryError(self.name, record.name)

        bucket = self._statics if record.is_static else self._buckets[record.visibility]
        existing = bucket.get(record.name)
        if (
            existing is not None
            and existing.visibility is record.visibility
            and not record.modifiers.override
            and not merge
        ):
            raise DuplicateDefinitionError(record.name, self.name)

        for other in (*self._buckets.values(), self._statics):
            other.pop(record.name, None)
        bucket[record.name] = record

    def finalize(self) -> None:
        """Freeze the registry and attach static data storage.

        Raises:
            FinalizedRegistryError: Already finalized.
        """
        if self._finalized:
            raise FinalizedRegistryError(self.name)
        self.static_values = {
            name: copy.deepcopy(record.value)
            for name, record in self._statics.items()
            if record.kind is MemberKind.PROPERTY
        }
        self._finalized = True
        log.debug("registry_finalized", class_name=self.name, members=len(self.names()))

    def records(self) -> Iterator[MemberRecord]:
        """Records declared by this class itself."""
        for visibility in _LOOKUP_ORDER:
            yield from self._buckets[visibility].values()
        yield from self._statics.values()

    def names(self) -> set[str]:
        return {record.name for record in self.records()}

    def all_names(self) -> set[str]:
        """Names declared anywhere in the ancestry."""
        names: set[str] = set()
        for registry in self.ancestry():
            names |= registry.names()
        return names
