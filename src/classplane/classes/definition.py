"""Class definition: declaration blocks in, instantiable class handles out.

``define`` walks a declaration mapping in order, hands each member to the
member builder, then finalizes the class registry. The resulting
``ClassType`` is called like a Python class to create instances.

Example::

    def increment(self):
        self.count += 1
        return self

    Counter = define("Counter", {
        "private count": 0,
        "public virtual increment": increment,
        "public value": lambda self: self.count,
    })
    Counter().increment().increment().value()  # 2
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import cache
from typing import Any

from classplane.classes.keywords import parse_member_key
from classplane.config.loader import load_config
from classplane.core.logging import clear_definition_context, get_logger, set_definition_context
from classplane.members.builder import MemberBuilder, select_builder
from classplane.members.errors import AbstractInstantiationError, MemberKeyError
from classplane.members.registry import MemberRegistry
from classplane.runtime.assembler import InstanceAssembler
from classplane.runtime.objects import PublicObject

log = get_logger("classes.definition")


@cache
def default_builder() -> MemberBuilder:
    return select_builder(load_config().runtime)


@cache
def default_assembler() -> InstanceAssembler:
    return InstanceAssembler()


class ClassType:
    """Handle for a class defined through ``define``.

    Calling it creates an instance. Public static members are read and
    written as attributes of the handle.
    """

    __slots__ = ("name", "parent", "registry", "_builder", "_assembler", "__weakref__")

    def __init__(
        self,
        name: str,
        parent: ClassType | None,
        builder: MemberBuilder,
        assembler: InstanceAssembler,
    ) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "parent", parent)
        object.__setattr__(
            self,
            "registry",
            MemberRegistry(self, name, parent.registry if parent is not None else None),
        )
        object.__setattr__(self, "_builder", builder)
        object.__setattr__(self, "_assembler", assembler)

    def __call__(self, *args: Any, **kwargs: Any) -> PublicObject:
        abstract = self._assembler.layout(self.registry).abstract_members()
        if abstract:
            raise AbstractInstantiationError(self.name, abstract)
        return self._assembler.instantiate(self.registry, *args, **kwargs)

    @property
    def is_abstract(self) -> bool:
        return bool(self._assembler.layout(self.registry).abstract_members())

    def extend(self, name: str, members: Mapping[str, Any] | None = None) -> ClassType:
        """Define a subtype of this class."""
        return define(name, members, parent=self, builder=self._builder, assembler=self._assembler)

    def __getattr__(self, name: str) -> Any:
        if not self.registry.is_finalized:
            raise AttributeError(name)
        access = self._assembler.class_access(self.registry)
        record = access.layout.statics.get(name)
        if record is None:
            raise AttributeError(f"Class {self.name} has no public static member '{name}'")
        return access.read(record)

    def __setattr__(self, name: str, value: Any) -> None:
        access = self._assembler.class_access(self.registry)
        record = access.layout.statics.get(name)
        if record is None:
            raise AttributeError(f"Class {self.name} has no public static member '{name}'")
        access.write(record, value)

    def __repr__(self) -> str:
        return f"<class {self.name}>"


def define(
    name: str,
    members: Mapping[str, Any] | None = None,
    parent: ClassType | None = None,
    *,
    builder: MemberBuilder | None = None,
    assembler: InstanceAssembler | None = None,
) -> ClassType:
    """Define a class from a mapping of declaration keys to member values.

    Keys follow ``parse_member_key``. Functions become methods, ``property``
    objects become getter/setter members, any other value is a data property.
    Members are built in mapping order. Any failure aborts the definition.
    """
    if builder is None:
        builder = parent._builder if parent is not None else default_builder()
    if assembler is None:
        assembler = parent._assembler if parent is not None else default_assembler()

    cls = ClassType(name, parent, builder, assembler)
    token = set_definition_context(name)
    try:
        for key, value in (members or {}).items():
            _declare(builder, cls.registry, key, value)
        cls.registry.finalize()
    finally:
        clear_definition_context(token)

    log.debug("class_defined", class_name=name, parent=parent.name if parent else None)
    return cls


def _declare(builder: MemberBuilder, registry: MemberRegistry, key: str, value: Any) -> None:
    member = parse_member_key(key)
    args = (member.modifiers, member.visibility, registry)
    if isinstance(value, property):
        if value.fget is None and value.fset is None:
            raise MemberKeyError(key, "property declares neither getter nor setter")
        if value.fget is not None:
            builder.build_getter(member.name, value.fget, *args)
        if value.fset is not None:
            builder.build_setter(member.name, value.fset, *args)
        return
    builder.build(member.name, value, *args)
