"""Resolved member tables for a finalized class.

A layout is computed once per class from its registry chain and then shared
by every instance. For each class in the chain it records the view a method
declared by that class gets of the instance: the class's own private members,
plus every protected and public member the class can see through its
ancestry. Instance members are dispatched to the most-derived override;
static members resolve to the nearest declaration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from classplane.members.models import MemberKind, MemberRecord, Visibility
from classplane.members.registry import MemberRegistry


@dataclass(slots=True)
class ClassLayout:
    """Per-class member tables, keyed by member name."""

    registry: MemberRegistry
    chain: tuple[MemberRegistry, ...]  # root first
    views: dict[Any, dict[str, MemberRecord]] = field(default_factory=dict)
    public: dict[str, MemberRecord] = field(default_factory=dict)
    statics: dict[str, MemberRecord] = field(default_factory=dict)

    @property
    def owner(self) -> Any:
        return self.registry.owner

    @property
    def name(self) -> str:
        return self.registry.name

    @property
    def leaf_view(self) -> dict[str, MemberRecord]:
        return self.views[self.owner]

    def registry_for(self, origin: Any) -> MemberRegistry:
        for registry in self.chain:
            if registry.owner is origin:
                return registry
        raise KeyError(origin)

    def abstract_members(self) -> list[str]:
        return sorted(name for name, record in self.leaf_view.items() if record.is_abstract)

    def data_records(self) -> list[MemberRecord]:
        """Every instance data record the chain declares, private ones included."""
        records: list[MemberRecord] = []
        for registry in self.chain:
            records.extend(
                record
                for record in registry.records()
                if record.kind is MemberKind.PROPERTY and not record.is_static
            )
        return records


def build_layout(registry: MemberRegistry) -> ClassLayout:
    """Resolve the member tables of a finalized class and its ancestry."""
    chain = tuple(reversed(list(registry.ancestry())))
    layout = ClassLayout(registry=registry, chain=chain)
    names = registry.all_names()

    for index, level in enumerate(chain):
        view: dict[str, MemberRecord] = {}
        descendants = chain[index + 1 :]
        for name in names:
            record = level.lookup(name, level.owner)
            if record is None:
                continue
            if record.visibility is not Visibility.PRIVATE and not record.is_static:
                record = _dispatch(name, record, descendants)
            view[name] = record
        layout.views[level.owner] = view

    for name, record in layout.leaf_view.items():
        if record.visibility is not Visibility.PUBLIC:
            continue
        if record.is_static:
            layout.statics[name] = record
        else:
            layout.public[name] = record
    return layout


def _dispatch(
    name: str, record: MemberRecord, descendants: tuple[MemberRegistry, ...]
) -> MemberRecord:
    """Most-derived non-private record for ``name`` below the viewing class."""
    for registry in reversed(descendants):
        candidate = registry.own(name)
        if candidate is not None and candidate.visibility is not Visibility.PRIVATE:
            return candidate
    return record
