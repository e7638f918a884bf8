"""Declaration and override compatibility rules.

``make_modifiers`` is the only way to obtain a ``Modifiers`` value; it rejects
illegal keyword combinations on a fresh declaration. ``validate_override``
decides whether a candidate record may shadow the record its class ancestry
already resolves for the same name.
"""

from __future__ import annotations

from collections.abc import Iterable

from classplane.members.errors import (
    AbstractOverrideOfConcreteError,
    ArityMismatchError,
    IncompatibleKindError,
    InvalidModifierCombinationError,
    NonVirtualOverrideError,
    OverrideRequiredError,
    VisibilityReductionError,
)
from classplane.members.models import MemberKind, MemberRecord, Modifiers, Visibility

MODIFIER_KEYWORDS = frozenset({"static", "virtual", "abstract", "override"})


def make_modifiers(
    name: str,
    kind: MemberKind,
    visibility: Visibility,
    keywords: Iterable[str] = (),
) -> Modifiers:
    """Build a validated modifier set for a fresh declaration.

    Abstract members are always virtual.

    Raises:
        InvalidModifierCombinationError: Unknown keyword or illegal pairing.
    """
    flags = frozenset(keywords)
    unknown = flags - MODIFIER_KEYWORDS
    if unknown:
        raise InvalidModifierCombinationError(
            name, f"unknown modifier(s) {', '.join(sorted(unknown))}"
        )

    static = "static" in flags
    virtual = "virtual" in flags
    abstract = "abstract" in flags

    if static and (virtual or abstract):
        raise InvalidModifierCombinationError(
            name, "static members cannot be virtual or abstract"
        )
    if abstract and visibility is Visibility.PRIVATE:
        raise InvalidModifierCombinationError(name, "private members cannot be abstract")
    if abstract and kind is not MemberKind.METHOD:
        raise InvalidModifierCombinationError(name, f"{kind.value} members cannot be abstract")

    return Modifiers(
        static=static,
        virtual=virtual or abstract,
        abstract=abstract,
        override="override" in flags,
    )


def validate_override(existing: MemberRecord | None, candidate: MemberRecord) -> None:
    """Check that ``candidate`` may shadow ``existing``.

    ``existing`` is None for a fresh declaration, in which case there is
    nothing further to check beyond ``make_modifiers``. A static member
    redeclared as static hides the inherited one, so only its kind is checked.

    Raises:
        IncompatibleKindError: Method/property/accessor mismatch, or a static
            and an instance member under one name.
        AbstractOverrideOfConcreteError: Abstract candidate over a concrete member.
        OverrideRequiredError: Missing override keyword on a non-abstract target.
        NonVirtualOverrideError: Target is not virtual.
        VisibilityReductionError: Candidate narrows the target's visibility.
        ArityMismatchError: Method override accepts fewer parameters.
    """
    if existing is None:
        return

    name = candidate.name
    if existing.kind is not candidate.kind:
        raise IncompatibleKindError(name, existing.label, candidate.label)

    if existing.is_static or candidate.is_static:
        if existing.is_static and candidate.is_static:
            return
        raise IncompatibleKindError(name, _describe(existing), _describe(candidate))

    if candidate.is_abstract and not existing.is_abstract:
        raise AbstractOverrideOfConcreteError(name)

    if not existing.is_abstract and not candidate.modifiers.override:
        raise OverrideRequiredError(name)

    if not existing.is_virtual:
        raise NonVirtualOverrideError(name)

    if candidate.visibility < existing.visibility:
        raise VisibilityReductionError(
            name, existing.visibility.value, candidate.visibility.value
        )

    if candidate.kind is MemberKind.METHOD:
        expected = existing.arity or 0
        actual = candidate.arity or 0
        if actual < expected:
            raise ArityMismatchError(name, expected, actual)


def _describe(record: MemberRecord) -> str:
    return f"static {record.label}" if record.is_static else record.label
