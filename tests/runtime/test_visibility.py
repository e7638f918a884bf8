"""Visibility enforcement on assembled instances.

Foo declares one public, protected and private property and method of each
kind; SubFoo extends it with its own privates and two overrides; SubSubFoo
adds nothing.
"""

from __future__ import annotations

from typing import Any

import pytest

from classplane.classes.definition import ClassType

PUB = "foo"
PROT = "bar"
PRIV = "baz"


def _get_prop(self, name):  # type: ignore[no-untyped-def]
    # reads whatever the calling class can see, None otherwise
    return getattr(self, name, None)


def _set_value(self, name, value):  # type: ignore[no-untyped-def]
    setattr(self, name, value)


def _get_self(self):  # type: ignore[no-untyped-def]
    return self


def _get_priv_prop(self):  # type: ignore[no-untyped-def]
    return self.parts


def _invoke_priv(self):  # type: ignore[no-untyped-def]
    return self._priv()


@pytest.fixture
def classes(define_class) -> tuple[ClassType, ClassType, ClassType]:
    foo = define_class(
        "Foo",
        {
            "public pub": PUB,
            "protected peeps": PROT,
            "private parts": PRIV,
            "public pubf": lambda self: PUB,
            "protected protf": lambda self: PROT,
            "private privf": lambda self: PRIV,
            "public virtual get_prop": _get_prop,
            "public non_override_get_prop": _get_prop,
            "public set_value": _set_value,
            "public get_self": _get_self,
            "public virtual get_self_override": lambda self: None,
            "public get_priv_prop": _get_priv_prop,
            "public invoke_priv": _invoke_priv,
            "private _priv": lambda self: PRIV,
        },
    )
    sub_foo = foo.extend(
        "SubFoo",
        {
            "private _pfoo": "baz",
            "public override get_self_override": _get_self,
            # overridden so lookups run in SubFoo's context
            "public override get_prop": _get_prop,
            "private my_own_private_foo": lambda self: None,
        },
    )
    sub_sub_foo = sub_foo.extend("SubSubFoo", {})
    return foo, sub_foo, sub_sub_foo


@pytest.fixture
def foo(classes) -> Any:
    return classes[0]()


@pytest.fixture
def sub_foo(classes) -> Any:
    return classes[1]()


@pytest.fixture
def sub_sub_foo(classes) -> Any:
    return classes[2]()


class TestPublicMembers:
    """Public members on the public and internal objects."""

    def test_accessible_externally(self, foo) -> None:
        assert foo.pub == PUB
        assert foo.pubf() == PUB

    def test_accessible_internally(self, foo) -> None:
        assert foo.get_prop("pub") == PUB
        assert foo.get_prop("pubf")() == PUB

    def test_internal_write_observable_internally_and_externally(self, foo) -> None:
        foo.set_value("pub", "moomookittypoo")

        assert foo.get_prop("pub") == "moomookittypoo"
        assert foo.pub == "moomookittypoo"

    def test_external_write_observable_internally(self, foo) -> None:
        foo.pub = "external"

        assert foo.get_prop("pub") == "external"

    def test_inherited_method_write_observable_on_subtype(self, sub_sub_foo) -> None:
        sub_sub_foo.set_value("pub", 42)

        assert sub_sub_foo.pub == 42
        assert sub_sub_foo.get_prop("pub") == 42


class TestNonPublicMembers:
    """Protected and private members."""

    @pytest.mark.parametrize("name", ["peeps", "parts", "protf", "privf"])
    def test_not_accessible_externally(self, foo, name: str) -> None:
        with pytest.raises(AttributeError):
            getattr(foo, name)

    @pytest.mark.parametrize("name", ["peeps", "parts"])
    def test_not_writable_externally(self, foo, name: str) -> None:
        with pytest.raises(AttributeError):
            setattr(foo, name, "nope")

    def test_protected_accessible_internally(self, foo) -> None:
        assert foo.get_prop("peeps") == PROT
        assert foo.get_prop("protf")() == PROT

    def test_private_accessible_internally(self, foo) -> None:
        assert foo.get_prop("parts") == PRIV
        assert foo.get_prop("privf")() == PRIV

    def test_protected_inherited_by_subtypes(self, sub_foo) -> None:
        assert sub_foo.get_prop("peeps") == PROT
        assert sub_foo.get_prop("protf")() == PROT

    def test_supertype_privates_hidden_from_subtypes(self, sub_foo) -> None:
        assert sub_foo.get_prop("parts") is None
        assert sub_foo.get_prop("privf") is None

    def test_parent_methods_reach_parent_privates(self, sub_foo, sub_sub_foo) -> None:
        assert sub_foo.get_priv_prop() == PRIV
        assert sub_foo.invoke_priv() == PRIV
        assert sub_sub_foo.get_priv_prop() == PRIV
        assert sub_sub_foo.invoke_priv() == PRIV

    def test_parent_methods_cannot_reach_subtype_privates(self, sub_foo) -> None:
        assert sub_foo.non_override_get_prop("_pfoo") is None
        assert sub_foo.non_override_get_prop("my_own_private_foo") is None

    def test_subtype_sees_own_privates(self, sub_foo) -> None:
        assert sub_foo.get_prop("_pfoo") == "baz"


class TestInstanceIsolation:
    """No per-instance storage is shared."""

    def test_protected_not_shared_with_subtype_instance(self, foo, sub_foo) -> None:
        foo.set_value("peeps", "changed")

        assert foo.get_prop("peeps") == "changed"
        assert sub_foo.get_prop("peeps") == PROT

    def test_protected_not_shared_between_same_type(self, classes, sub_foo) -> None:
        other = classes[1]()
        other.set_value("peeps", "changed")

        assert sub_foo.get_prop("peeps") == PROT

    def test_private_not_shared_between_same_type(self, classes, foo) -> None:
        other = classes[0]()
        other.set_value("parts", "changed")

        assert foo.get_priv_prop() == PRIV
        assert other.get_priv_prop() == "changed"

    def test_mutable_defaults_copied_per_instance(self, define_class) -> None:
        def add(self, item):  # type: ignore[no-untyped-def]
            self.items.append(item)
            return self

        bag = define_class("Bag", {"public items": [], "public add": add})
        first, second = bag(), bag()

        first.add("x")

        assert first.items == ["x"]
        assert second.items == []


class TestReturningSelf:
    """Methods returning their context hand back the instance."""

    def test_returns_instance(self, foo) -> None:
        assert foo.get_self() is foo

    def test_inherited_method_returns_subtype_instance(self, sub_foo) -> None:
        assert sub_foo.get_self() is sub_foo

    def test_overridden_method_returns_subtype_instance(self, sub_foo) -> None:
        assert sub_foo.get_self_override() is sub_foo

    def test_method_fetched_internally_still_returns_instance(self, foo) -> None:
        assert foo.get_prop("get_self")() is foo
