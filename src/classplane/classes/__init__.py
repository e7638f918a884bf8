"""Class definition exports."""

from classplane.classes.definition import ClassType, default_assembler, default_builder, define
from classplane.classes.keywords import MemberKey, parse_member_key

__all__ = [
    "ClassType",
    "MemberKey",
    "default_assembler",
    "default_builder",
    "define",
    "parse_member_key",
]
