"""Member records and the value types they are built from."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Visibility(Enum):
    """Member accessibility level. Higher rank is less restrictive."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @property
    def rank(self) -> int:
        return _VISIBILITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Visibility):
            return NotImplemented
        return self.rank < other.rank


_VISIBILITY_RANK = {
    Visibility.PRIVATE: 0,
    Visibility.PROTECTED: 1,
    Visibility.PUBLIC: 2,
}


class MemberKind(Enum):
    METHOD = "method"
    PROPERTY = "property"
    ACCESSOR = "accessor"


@dataclass(frozen=True, slots=True)
class Modifiers:
    """Validated modifier set. Build through ``validator.make_modifiers``."""

    static: bool = False
    virtual: bool = False
    abstract: bool = False
    override: bool = False

    def keywords(self) -> frozenset[str]:
        return frozenset(
            name
            for name in ("static", "virtual", "abstract", "override")
            if getattr(self, name)
        )


@dataclass(frozen=True, slots=True)
class AccessorPair:
    """Getter and/or setter backing an accessor member."""

    getter: Callable[..., Any] | None = None
    setter: Callable[..., Any] | None = None

    @property
    def label(self) -> str:
        """Human-readable side(s) present, used in error messages."""
        if self.getter is not None and self.setter is not None:
            return "getter/setter"
        return "getter" if self.getter is not None else "setter"

    def merge(self, other: AccessorPair) -> AccessorPair:
        return AccessorPair(
            getter=other.getter if other.getter is not None else self.getter,
            setter=other.setter if other.setter is not None else self.setter,
        )


@dataclass(frozen=True, slots=True, eq=False)
class MemberRecord:
    """Committed description of one member of one class.

    Records are never edited once committed. An override is a new record
    whose ``overridden`` field points at the record it shadows.
    """

    name: str
    kind: MemberKind
    visibility: Visibility
    origin: Any
    modifiers: Modifiers
    value: Any
    arity: int | None = None
    overridden: MemberRecord | None = None

    @property
    def is_static(self) -> bool:
        return self.modifiers.static

    @property
    def is_virtual(self) -> bool:
        return self.modifiers.virtual or self.modifiers.abstract

    @property
    def is_abstract(self) -> bool:
        return self.modifiers.abstract

    @property
    def label(self) -> str:
        if self.kind is MemberKind.ACCESSOR:
            return self.value.label
        return self.kind.value

    def __repr__(self) -> str:
        flags = " ".join(sorted(self.modifiers.keywords()))
        prefix = f"{self.visibility.value} {flags}".strip()
        return f"<MemberRecord {prefix} {self.kind.value} {self.name!r}>"


def method_arity(func: Callable[..., Any]) -> int:
    """Count declared positional parameters, excluding the leading context one."""
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 0
    positional = [
        p
        for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    return max(len(positional) - 1, 0)
