"""Runtime module exports."""

from classplane.runtime.assembler import (
    CONSTRUCTOR,
    InstanceAssembler,
    class_of,
    is_instance_of,
)
from classplane.runtime.layout import ClassLayout, build_layout
from classplane.runtime.objects import (
    BoundMethod,
    InstanceState,
    InternalObject,
    MemberAccess,
    PublicObject,
)

__all__ = [
    "CONSTRUCTOR",
    "BoundMethod",
    "ClassLayout",
    "InstanceAssembler",
    "InstanceState",
    "InternalObject",
    "MemberAccess",
    "PublicObject",
    "build_layout",
    "class_of",
    "is_instance_of",
]
