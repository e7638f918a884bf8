"""Instance assembly.

``InstanceAssembler.instantiate`` turns a finalized registry into a fresh
instance pair. Layouts are resolved once per class and kept on its registry;
every instance gets its own storage.
"""

from __future__ import annotations

from typing import Any

from classplane.core.logging import get_logger
from classplane.members.errors import ConstructionError
from classplane.members.models import MemberKind
from classplane.members.registry import MemberRegistry
from classplane.runtime.layout import ClassLayout, build_layout
from classplane.runtime.objects import InstanceState, MemberAccess, PublicObject

log = get_logger("runtime.assembler")

CONSTRUCTOR = "__init__"


class InstanceAssembler:
    """Builds instance pairs from finalized member registries."""

    def layout(self, registry: MemberRegistry) -> ClassLayout:
        """Resolved member tables for ``registry``'s class.

        Raises:
            ConstructionError: The class or one of its ancestors is still
                being defined.
        """
        layout: ClassLayout | None = registry.runtime.get("layout")
        if layout is not None:
            return layout
        for level in registry.ancestry():
            if not level.is_finalized:
                raise ConstructionError(registry.name, f"class {level.name} is not finalized")
        layout = build_layout(registry)
        registry.runtime["layout"] = layout
        log.debug(
            "layout_built",
            class_name=registry.name,
            depth=len(layout.chain),
            public=sorted(layout.public),
        )
        return layout

    def class_access(self, registry: MemberRegistry) -> MemberAccess:
        """Static member access for a class, shared by all its instances."""
        access: MemberAccess | None = registry.runtime.get("class_access")
        if access is None:
            access = MemberAccess(self.layout(registry), registry.owner)
            registry.runtime["class_access"] = access
        return access

    def instantiate(self, registry: MemberRegistry, *args: Any, **kwargs: Any) -> PublicObject:
        """Assemble a new instance and run its constructor, if any."""
        state = InstanceState(self.layout(registry))
        constructor = state.layout.leaf_view.get(CONSTRUCTOR)
        if constructor is not None and constructor.kind is MemberKind.METHOD:
            state.bind(constructor)(*args, **kwargs)
        return state.handle


def class_of(instance: PublicObject) -> Any:
    """Class object an instance handle was assembled from."""
    return instance._cp_state.layout.owner


def is_instance_of(instance: Any, cls: Any) -> bool:
    """True when ``instance`` was assembled from ``cls`` or one of its subtypes."""
    if not isinstance(instance, PublicObject):
        return False
    return any(registry.owner is cls for registry in instance._cp_state.layout.chain)
