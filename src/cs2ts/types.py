"""Type and visibility mapping: C# type references → TypeScript names."""

from __future__ import annotations

from typing import Callable, Iterable


NUMBER_TYPE = "number"
STRING_TYPE = "string"

PUBLIC_KEYWORD = "public"
PRIVATE_KEYWORD = "private"


# Ordered rules, first match wins. Each maps a source type to its output name.
_TYPE_RULES: list[tuple[Callable[[str], bool], Callable[[str], str]]] = [
    (lambda t: t == "void", lambda t: "void"),
    # Exception types are assumed to exist under the same name
    (lambda t: t.endswith("Exception"), lambda t: t),
    (lambda t: t.startswith("int"), lambda t: NUMBER_TYPE),
]


def map_type(type_ref: str) -> str:
    """Convert a source type reference to an output type name.

    Deliberately coarse: void, exception passthrough, numeric for anything
    starting with ``int``, and string for everything else.
    """
    text = str(type_ref).strip()
    for matches, convert in _TYPE_RULES:
        if matches(text):
            return convert(text)
    return STRING_TYPE


def map_visibility(modifiers: Iterable[str]) -> str:
    """Collapse a modifier list to ``public`` or ``private``.

    Only the public keyword is inspected; any other modifier list is private.
    """
    return PUBLIC_KEYWORD if PUBLIC_KEYWORD in modifiers else PRIVATE_KEYWORD
