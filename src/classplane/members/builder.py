"""Member builders.

One builder call per declared member: resolve what the class ancestry already
holds under the name, validate the transition, then commit a new record.
Nothing reaches the registry unless every check passes.

Two builders share the contract. ``MemberBuilder`` supports every member kind;
``FallbackMemberBuilder`` targets environments without accessor support and
rejects getters and setters. ``select_builder`` picks one from configuration.
"""

from __future__ import annotations

import copy
import inspect
import pickle
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from classplane.core.logging import get_logger
from classplane.members.errors import (
    DuplicateDefinitionError,
    FinalizedRegistryError,
    MemberError,
    UncopyableValueError,
    UnsupportedFeatureError,
)
from classplane.members.models import (
    AccessorPair,
    MemberKind,
    MemberRecord,
    Visibility,
    method_arity,
)
from classplane.members.validator import make_modifiers, validate_override

if TYPE_CHECKING:
    from classplane.config.models import RuntimeConfig
    from classplane.members.registry import MemberRegistry

log = get_logger("members.builder")


class MemberBuilder:
    """Validates and commits member declarations into a class registry."""

    supports_accessors = True

    def build(
        self,
        name: str,
        value: Any,
        modifiers: Iterable[str],
        visibility: Visibility,
        target: MemberRegistry,
    ) -> MemberRecord:
        """Build a member, choosing its kind from ``value``.

        Functions become methods, ``AccessorPair`` values become accessors,
        anything else is a data property.
        """
        if isinstance(value, AccessorPair):
            return self._build_accessor(name, value, modifiers, visibility, target)
        if inspect.isroutine(value):
            return self.build_method(name, value, modifiers, visibility, target)
        return self.build_property(name, value, modifiers, visibility, target)

    def build_method(
        self,
        name: str,
        func: Callable[..., Any],
        modifiers: Iterable[str],
        visibility: Visibility,
        target: MemberRegistry,
    ) -> MemberRecord:
        return self._build(
            name, MemberKind.METHOD, func, modifiers, visibility, target, arity=method_arity(func)
        )

    def build_property(
        self,
        name: str,
        value: Any,
        modifiers: Iterable[str],
        visibility: Visibility,
        target: MemberRegistry,
    ) -> MemberRecord:
        return self._build(name, MemberKind.PROPERTY, value, modifiers, visibility, target)

    def build_getter(
        self,
        name: str,
        getter: Callable[..., Any],
        modifiers: Iterable[str],
        visibility: Visibility,
        target: MemberRegistry,
    ) -> MemberRecord:
        return self._build_accessor(
            name, AccessorPair(getter=getter), modifiers, visibility, target
        )

    def build_setter(
        self,
        name: str,
        setter: Callable[..., Any],
        modifiers: Iterable[str],
        visibility: Visibility,
        target: MemberRegistry,
    ) -> MemberRecord:
        return self._build_accessor(
            name, AccessorPair(setter=setter), modifiers, visibility, target
        )

    def _build_accessor(
        self,
        name: str,
        pair: AccessorPair,
        modifiers: Iterable[str],
        visibility: Visibility,
        target: MemberRegistry,
    ) -> MemberRecord:
        return self._build(name, MemberKind.ACCESSOR, pair, modifiers, visibility, target)

    def _build(
        self,
        name: str,
        kind: MemberKind,
        value: Any,
        keywords: Iterable[str],
        visibility: Visibility,
        target: MemberRegistry,
        *,
        arity: int | None = None,
    ) -> MemberRecord:
        if target.is_finalized:
            raise FinalizedRegistryError(target.name, name)

        keywords = frozenset(keywords)
        try:
            modifiers = make_modifiers(name, kind, visibility, keywords)
            if kind is MemberKind.PROPERTY:
                _check_copyable(name, value)
            existing = target.lookup(name)
            merge = existing is not None and _completes_accessor(existing, kind, value, target)
            if merge:
                # join the pair, then validate against what the first half overrode
                value = existing.value.merge(value)
                overridden = existing = existing.overridden
            else:
                overridden = existing

            candidate = MemberRecord(
                name=name,
                kind=kind,
                visibility=visibility,
                origin=target.owner,
                modifiers=modifiers,
                value=value,
                arity=arity,
                overridden=overridden,
            )
            if (
                not merge
                and existing is not None
                and existing.origin is target.owner
                and existing.kind is kind
                and not modifiers.override
            ):
                raise DuplicateDefinitionError(name, target.name)
            validate_override(existing, candidate)
            target.commit(candidate, merge=merge)
        except MemberError as e:
            log.debug("member_rejected", class_name=target.name, member=name, error=str(e))
            raise

        log.debug(
            "member_built",
            class_name=target.name,
            member=name,
            kind=kind.value,
            visibility=visibility.value,
            modifiers=sorted(modifiers.keywords()),
        )
        return candidate


class FallbackMemberBuilder(MemberBuilder):
    """Builder for environments without accessor support.

    Behaves exactly like ``MemberBuilder`` except that getter and setter
    members are always rejected.
    """

    supports_accessors = False

    def _build_accessor(
        self,
        name: str,
        pair: AccessorPair,
        modifiers: Iterable[str],
        visibility: Visibility,
        target: MemberRegistry,
    ) -> MemberRecord:
        if pair.getter is not None and pair.setter is not None:
            operation = "Getters and setters are"
        elif pair.getter is not None:
            operation = "Getters are"
        else:
            operation = "Setters are"
        raise UnsupportedFeatureError(operation, name)


def _check_copyable(name: str, value: Any) -> None:
    """Data values are deep-copied into every instance (or once, for statics)."""
    try:
        copy.deepcopy(value)
    except (TypeError, copy.Error, pickle.PicklingError) as e:
        raise UncopyableValueError(name, str(e)) from e


def _completes_accessor(
    existing: MemberRecord,
    kind: MemberKind,
    value: Any,
    target: MemberRegistry,
) -> bool:
    """True when ``value`` supplies the missing half of an accessor this class declared."""
    if existing.origin is not target.owner:
        return False
    if kind is not MemberKind.ACCESSOR or existing.kind is not MemberKind.ACCESSOR:
        return False
    current: AccessorPair = existing.value
    if value.getter is not None and current.getter is not None:
        return False
    if value.setter is not None and current.setter is not None:
        return False
    return True


def select_builder(config: RuntimeConfig | None = None) -> MemberBuilder:
    """Pick the builder matching the runtime's accessor capability."""
    if config is None or config.accessors:
        return MemberBuilder()
    return FallbackMemberBuilder()
