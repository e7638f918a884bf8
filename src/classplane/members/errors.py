"""Class-definition error types.

All of these abort the enclosing class definition; none is recovered from
inside classplane.
"""


class MemberError(Exception):
    """Base error for member building and instance assembly."""

    pass


class ClassDefinitionError(MemberError, TypeError):
    """A member declaration violates the class contract."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class InvalidModifierCombinationError(ClassDefinitionError):
    """Illegal modifier pairing on a declaration."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(name, f"Invalid modifiers for member '{name}': {reason}")
        self.reason = reason


class DuplicateDefinitionError(ClassDefinitionError):
    """Same-class redeclaration without override intent."""

    def __init__(self, name: str, class_name: str) -> None:
        super().__init__(name, f"Member '{name}' is already defined in class {class_name}")
        self.class_name = class_name


class OverrideRequiredError(ClassDefinitionError):
    """An inherited member was redeclared without the override keyword."""

    def __init__(self, name: str) -> None:
        super().__init__(
            name, f"Member '{name}' overrides an inherited member and must be declared override"
        )


class NonVirtualOverrideError(ClassDefinitionError):
    """Attempt to override a member that is not virtual."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Cannot override non-virtual member '{name}'")


class IncompatibleKindError(ClassDefinitionError):
    """Method, property and accessor members cannot replace one another."""

    def __init__(self, name: str, existing: str, candidate: str) -> None:
        super().__init__(name, f"Cannot override {existing} '{name}' with {candidate}")
        self.existing = existing
        self.candidate = candidate


class ArityMismatchError(ClassDefinitionError):
    """Override declares fewer parameters than the member it overrides."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        super().__init__(
            name,
            f"Override of method '{name}' must accept at least {expected} "
            f"parameter(s), got {actual}",
        )
        self.expected = expected
        self.actual = actual


class AbstractOverrideOfConcreteError(ClassDefinitionError):
    """A concrete member cannot be overridden by an abstract one."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Cannot override concrete member '{name}' with abstract member")


class VisibilityReductionError(ClassDefinitionError):
    """Override narrows the visibility of the member it overrides."""

    def __init__(self, name: str, existing: str, candidate: str) -> None:
        super().__init__(
            name, f"Cannot reduce visibility of '{name}' from {existing} to {candidate}"
        )
        self.existing = existing
        self.candidate = candidate


class UncopyableValueError(ClassDefinitionError):
    """Data member's initial value cannot be deep-copied into new storage."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(name, f"Initial value of '{name}' cannot be copied: {reason}")
        self.reason = reason


class MemberKeyError(ClassDefinitionError):
    """Member declaration key could not be parsed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(key, f"Invalid member declaration '{key}': {reason}")
        self.reason = reason


class UnsupportedFeatureError(MemberError):
    """Feature unavailable with the selected member builder."""

    def __init__(self, operation: str, name: str | None = None) -> None:
        target = f" (member '{name}')" if name else ""
        super().__init__(f"{operation} unsupported in this environment{target}")
        self.operation = operation
        self.name = name


class FinalizedRegistryError(MemberError):
    """Mutation attempted on a registry whose class definition is complete."""

    def __init__(self, class_name: str, name: str | None = None) -> None:
        detail = f": cannot add member '{name}'" if name else ""
        super().__init__(f"Class {class_name} is already finalized{detail}")
        self.class_name = class_name
        self.name = name


class ConstructionError(MemberError):
    """Instance could not be assembled."""

    def __init__(self, class_name: str, reason: str) -> None:
        super().__init__(f"Cannot instantiate {class_name}: {reason}")
        self.class_name = class_name
        self.reason = reason


class AbstractInstantiationError(ConstructionError):
    """Class still has abstract members."""

    def __init__(self, class_name: str, members: list[str]) -> None:
        super().__init__(class_name, f"abstract member(s) {', '.join(members)} not implemented")
        self.members = members
