"""Member declaration keys: ``"<keyword>* <name>"``, e.g. ``"protected virtual draw"``."""

from __future__ import annotations

from dataclasses import dataclass

from classplane.members.errors import MemberKeyError
from classplane.members.models import Visibility
from classplane.members.validator import MODIFIER_KEYWORDS

VISIBILITY_KEYWORDS = {v.value: v for v in Visibility}


@dataclass(frozen=True, slots=True)
class MemberKey:
    name: str
    visibility: Visibility
    modifiers: frozenset[str]


def parse_member_key(key: str) -> MemberKey:
    """Split a declaration key into name, visibility and modifier keywords.

    Visibility defaults to public.

    Raises:
        MemberKeyError: Missing or invalid name, unknown or repeated keyword,
            or more than one visibility keyword.
    """
    tokens = key.split()
    if not tokens:
        raise MemberKeyError(key, "missing member name")

    *keywords, name = tokens
    if name in VISIBILITY_KEYWORDS or name in MODIFIER_KEYWORDS:
        raise MemberKeyError(key, "missing member name")
    if not name.isidentifier():
        raise MemberKeyError(key, f"'{name}' is not a valid identifier")

    visibility: Visibility | None = None
    modifiers: set[str] = set()
    seen: set[str] = set()
    for keyword in keywords:
        if keyword in seen:
            raise MemberKeyError(key, f"repeated keyword '{keyword}'")
        seen.add(keyword)
        if keyword in VISIBILITY_KEYWORDS:
            if visibility is not None:
                raise MemberKeyError(key, "only one visibility keyword is allowed")
            visibility = VISIBILITY_KEYWORDS[keyword]
        elif keyword in MODIFIER_KEYWORDS:
            modifiers.add(keyword)
        else:
            raise MemberKeyError(key, f"unknown keyword '{keyword}'")

    return MemberKey(name, visibility or Visibility.PUBLIC, frozenset(modifiers))
