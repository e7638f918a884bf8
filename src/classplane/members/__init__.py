"""Member building: records, registry, validation and builders."""

from classplane.members.builder import FallbackMemberBuilder, MemberBuilder, select_builder
from classplane.members.errors import (
    AbstractInstantiationError,
    AbstractOverrideOfConcreteError,
    ArityMismatchError,
    ClassDefinitionError,
    ConstructionError,
    DuplicateDefinitionError,
    FinalizedRegistryError,
    IncompatibleKindError,
    InvalidModifierCombinationError,
    MemberError,
    MemberKeyError,
    NonVirtualOverrideError,
    OverrideRequiredError,
    UncopyableValueError,
    UnsupportedFeatureError,
    VisibilityReductionError,
)
from classplane.members.models import (
    AccessorPair,
    MemberKind,
    MemberRecord,
    Modifiers,
    Visibility,
)
from classplane.members.registry import MemberRegistry
from classplane.members.validator import make_modifiers, validate_override

__all__ = [
    # Models
    "AccessorPair",
    "MemberKind",
    "MemberRecord",
    "Modifiers",
    "Visibility",
    # Registry / building
    "FallbackMemberBuilder",
    "MemberBuilder",
    "MemberRegistry",
    "make_modifiers",
    "select_builder",
    "validate_override",
    # Errors
    "AbstractInstantiationError",
    "AbstractOverrideOfConcreteError",
    "ArityMismatchError",
    "ClassDefinitionError",
    "ConstructionError",
    "DuplicateDefinitionError",
    "FinalizedRegistryError",
    "IncompatibleKindError",
    "InvalidModifierCombinationError",
    "MemberError",
    "MemberKeyError",
    "NonVirtualOverrideError",
    "OverrideRequiredError",
    "UncopyableValueError",
    "UnsupportedFeatureError",
    "VisibilityReductionError",
]
