"""Runtime objects backing a classplane instance.

Every instance is a pair: a ``PublicObject`` handed to callers, exposing only
public members, and one ``InternalObject`` per class in the chain, used as
``self`` by methods that class declares. Both read and write through the same
``InstanceState``, so a public property assigned inside a method is the value
seen from outside and the reverse.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from classplane.members.models import MemberKind, MemberRecord, Visibility
from classplane.runtime.layout import ClassLayout

SUPER_ATTRIBUTE = "__super__"


class BoundMethod:
    """Method record bound to the context its declaring class executes in.

    Calls run the underlying function with the context as first argument. A
    result that *is* that context is replaced by ``substitute`` (the public
    object or class handle) so the context never escapes.
    """

    __slots__ = ("record", "context", "substitute", "_binder")

    def __init__(
        self,
        record: MemberRecord,
        context: InternalObject,
        substitute: Any,
        binder: Callable[[MemberRecord], BoundMethod],
    ) -> None:
        self.record = record
        self.context = context
        self.substitute = substitute
        self._binder = binder

    @property
    def __name__(self) -> str:
        return self.record.name

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        record = self.record
        if record.is_abstract:
            raise NotImplementedError(f"Abstract method '{record.name}' has no implementation")

        parent = record.overridden
        has_super = parent is not None and parent.kind is MemberKind.METHOD and not parent.is_abstract
        self.context._cp_supers.append(self._binder(parent) if has_super else None)
        try:
            result = record.value(self.context, *args, **kwargs)
        finally:
            self.context._cp_supers.pop()
        return self.substitute if result is self.context else result

    def __repr__(self) -> str:
        return f"<bound method {self.record.name} of {self.substitute!r}>"


class InternalObject:
    """Invocation context for methods of one class in an instance's chain.

    Resolves the class's own private members and every protected or public
    member visible from that class. Undeclared names raise AttributeError.
    """

    __slots__ = ("_cp_access", "_cp_owner", "_cp_view", "_cp_supers")

    def __init__(self, access: MemberAccess, owner: Any, view: dict[str, MemberRecord]) -> None:
        object.__setattr__(self, "_cp_access", access)
        object.__setattr__(self, "_cp_owner", owner)
        object.__setattr__(self, "_cp_view", view)
        object.__setattr__(self, "_cp_supers", [])

    def __getattr__(self, name: str) -> Any:
        if name == SUPER_ATTRIBUTE:
            supers = self._cp_supers
            if supers and supers[-1] is not None:
                return supers[-1]
            raise AttributeError("No overridden implementation to call")
        record = self._cp_view.get(name)
        if record is None:
            raise AttributeError(f"'{self._cp_access.layout.name}' has no member '{name}'")
        return self._cp_access.read(record)

    def __setattr__(self, name: str, value: Any) -> None:
        record = self._cp_view.get(name)
        if record is None:
            raise AttributeError(f"'{self._cp_access.layout.name}' has no member '{name}'")
        self._cp_access.write(record, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete member '{name}'")

    def __dir__(self) -> list[str]:
        return sorted(self._cp_view)

    def __repr__(self) -> str:
        return f"<internal {self._cp_access.layout.name} context>"


class PublicObject:
    """Instance handle given to callers. Exposes public, non-static members only."""

    __slots__ = ("_cp_state",)

    def __init__(self, state: InstanceState) -> None:
        object.__setattr__(self, "_cp_state", state)

    def __getattr__(self, name: str) -> Any:
        state = self._cp_state
        record = state.layout.public.get(name)
        if record is None:
            raise AttributeError(f"'{state.layout.name}' object has no public member '{name}'")
        return state.read(record)

    def __setattr__(self, name: str, value: Any) -> None:
        state = self._cp_state
        record = state.layout.public.get(name)
        if record is None:
            raise AttributeError(f"'{state.layout.name}' object has no public member '{name}'")
        state.write(record, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete member '{name}'")

    def __dir__(self) -> list[str]:
        return sorted(self._cp_state.layout.public)

    def __repr__(self) -> str:
        return f"<{self._cp_state.layout.name} instance>"


class MemberAccess:
    """Reads and writes class-level (static) members for a layout."""

    def __init__(self, layout: ClassLayout, handle: Any) -> None:
        self.layout = layout
        self.handle = handle
        self._static_contexts: dict[Any, InternalObject] = {}

    def read(self, record: MemberRecord) -> Any:
        if record.kind is MemberKind.METHOD:
            return self.bind(record)
        if record.kind is MemberKind.ACCESSOR:
            getter = record.value.getter
            if getter is None:
                raise AttributeError(f"Member '{record.name}' has no getter")
            context = self.context_for(record)
            result = _call_in(context, getter)
            return self.substitute_for(record) if result is context else result
        return self.storage_for(record)[record.name]

    def write(self, record: MemberRecord, value: Any) -> None:
        if record.kind is MemberKind.METHOD:
            raise AttributeError(f"Cannot assign to method '{record.name}'")
        if record.kind is MemberKind.ACCESSOR:
            setter = record.value.setter
            if setter is None:
                raise AttributeError(f"Member '{record.name}' has no setter")
            _call_in(self.context_for(record), setter, value)
            return
        self.storage_for(record)[record.name] = value

    def bind(self, record: MemberRecord) -> BoundMethod:
        return BoundMethod(record, self.context_for(record), self.substitute_for(record), self.bind)

    def context_for(self, record: MemberRecord) -> InternalObject:
        if record.is_static:
            return self.static_context(record.origin)
        raise AttributeError(f"Member '{record.name}' requires an instance")

    def substitute_for(self, record: MemberRecord) -> Any:
        return record.origin if record.is_static else self.handle

    def storage_for(self, record: MemberRecord) -> dict[str, Any]:
        if record.is_static:
            return self.layout.registry_for(record.origin).static_values
        raise AttributeError(f"Member '{record.name}' requires an instance")

    def static_context(self, origin: Any) -> InternalObject:
        context = self._static_contexts.get(origin)
        if context is None:
            view = {
                name: record
                for name, record in self.layout.views[origin].items()
                if record.is_static
            }
            context = InternalObject(self, origin, view)
            self._static_contexts[origin] = context
        return context


class InstanceState(MemberAccess):
    """Storage and contexts owned by exactly one instance."""

    def __init__(self, layout: ClassLayout) -> None:
        super().__init__(layout, handle=None)
        self.public: dict[str, Any] = {}
        self.protected: dict[str, Any] = {}
        self.private: dict[Any, dict[str, Any]] = {r.owner: {} for r in layout.chain}

        # root first, so derived initial values replace inherited ones
        for record in layout.data_records():
            self._slot(record)[record.name] = copy.deepcopy(record.value)

        self.handle = PublicObject(self)
        self.layers = {
            registry.owner: InternalObject(self, registry.owner, layout.views[registry.owner])
            for registry in layout.chain
        }

    def context_for(self, record: MemberRecord) -> InternalObject:
        if record.is_static:
            return self.static_context(record.origin)
        return self.layers[record.origin]

    def storage_for(self, record: MemberRecord) -> dict[str, Any]:
        if record.is_static:
            return super().storage_for(record)
        return self._slot(record)

    def _slot(self, record: MemberRecord) -> dict[str, Any]:
        if record.visibility is Visibility.PUBLIC:
            return self.public
        if record.visibility is Visibility.PROTECTED:
            return self.protected
        return self.private[record.origin]


def _call_in(context: InternalObject, func: Callable[..., Any], *args: Any) -> Any:
    """Run an accessor half in ``context`` with no ``__super__`` binding."""
    context._cp_supers.append(None)
    try:
        return func(context, *args)
    finally:
        context._cp_supers.pop()
