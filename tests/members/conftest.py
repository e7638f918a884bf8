"""Fixtures for member building tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from classplane.members import MemberBuilder, MemberRegistry

RegistryFactory = Callable[..., MemberRegistry]


class Owner:
    """Stand-in class object; registries only need identity from their owner."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"<Owner {self.name}>"


@pytest.fixture
def builder() -> MemberBuilder:
    return MemberBuilder()


@pytest.fixture
def make_registry() -> RegistryFactory:
    """Create a registry for a fresh owner, optionally extending ``parent``."""

    def _make(name: str = "Base", parent: MemberRegistry | None = None) -> MemberRegistry:
        return MemberRegistry(Owner(name), name, parent)

    return _make
