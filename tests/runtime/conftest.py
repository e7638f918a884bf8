"""Fixtures for runtime tests."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import Any

import pytest

from classplane.classes.definition import ClassType, define
from classplane.members.builder import MemberBuilder
from classplane.runtime.assembler import InstanceAssembler


@pytest.fixture
def assembler() -> InstanceAssembler:
    return InstanceAssembler()


@pytest.fixture
def define_class(assembler: InstanceAssembler) -> Callable[..., ClassType]:
    """``define`` bound to an isolated builder and assembler."""
    fn: Callable[..., Any] = partial(define, builder=MemberBuilder(), assembler=assembler)
    return fn
