"""Classplane - visibility, override contracts and static members for Python objects."""

from classplane.classes import ClassType, define, parse_member_key
from classplane.core import configure_logging, get_logger
from classplane.members import (
    AccessorPair,
    MemberBuilder,
    MemberRegistry,
    Visibility,
    select_builder,
)
from classplane.members.errors import (
    AbstractInstantiationError,
    ClassDefinitionError,
    ConstructionError,
    MemberError,
    UnsupportedFeatureError,
)
from classplane.runtime import InstanceAssembler, class_of, is_instance_of

__version__ = "0.1.0"

__all__ = [
    "AbstractInstantiationError",
    "AccessorPair",
    "ClassDefinitionError",
    "ClassType",
    "ConstructionError",
    "InstanceAssembler",
    "MemberBuilder",
    "MemberError",
    "MemberRegistry",
    "UnsupportedFeatureError",
    "Visibility",
    "class_of",
    "configure_logging",
    "define",
    "get_logger",
    "is_instance_of",
    "parse_member_key",
    "select_builder",
]
