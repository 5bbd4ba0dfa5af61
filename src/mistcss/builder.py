"""Component model builder: one pass over reduced declarations.

The builder is a two-state machine.  Its cursor is either ``NoCurrent`` (no
scope seen yet, rules are ignored) or ``Has(name)`` (rules feed the named
component).  Scope declarations move the cursor; rule declarations never do.

Classification policy for a rule's selector:

1. ``<tag>:scope`` binds the element tag and nothing else.
2. Enum matchers are applied first; values are appended once, in the order
   they are first seen.
3. Boolean matchers are applied second and only claim names that are still
   free.

A name keeps the kind it was given by its first match: an enum is never
downgraded to a boolean, and a boolean ignores later enum values.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from mistcss.errors import ParseFailure
from mistcss.extractor import (
    extract_boolean_attributes,
    extract_enum_attributes,
    kebab_to_pascal,
)
from mistcss.model.component import BooleanAttribute, Component, Components, EnumAttribute
from mistcss.model.node import RULE, SCOPE, Declaration

__all__ = ["NoCurrent", "Has", "Cursor", "ComponentBuilder", "build_components", "scope_class_name"]

logger = logging.getLogger(__name__)

_SCOPE_RE = re.compile(r"\(\s*\.(?P<name>-?[A-Za-z_][\w-]*)\s*\)")
_TAG_RE = re.compile(r"(?P<tag>[A-Za-z][\w-]*):scope")

SCOPE_SUFFIX = ":scope"


@dataclass(frozen=True)
class NoCurrent:
    """Cursor state before any scope declaration."""


@dataclass(frozen=True)
class Has:
    """Cursor state pointing at the component being filled."""

    name: str


Cursor = Union[NoCurrent, Has]


def scope_class_name(prop: str | None) -> str:
    """Extract ``my-button`` from a scope prelude like ``(.my-button)``."""
    match = _SCOPE_RE.match(prop.strip()) if prop else None
    if match is None:
        raise ParseFailure(f"Could not parse scope class name from {prop!r}")
    return match.group("name")


def _bound_tag(selector: str) -> str | None:
    """Return the tag of a ``<tag>:scope`` selector, or None."""
    if not selector.endswith(SCOPE_SUFFIX):
        return None
    match = _TAG_RE.fullmatch(selector)
    return match.group("tag") if match else None


class ComponentBuilder:
    """Accumulates Components from declarations fed in document order."""

    def __init__(self) -> None:
        self.components: Components = {}
        self.cursor: Cursor = NoCurrent()

    # ---- state transitions ----

    def open_scope(self, class_name: str) -> str:
        """Register a component for *class_name* and make it current."""
        name = kebab_to_pascal(class_name)
        if name in self.components:
            logger.warning("Scope %r redeclared; discarding earlier definition", name)
        self.components[name] = Component(class_name=class_name)
        self.cursor = Has(name)
        return name

    def current(self) -> Component | None:
        if isinstance(self.cursor, Has):
            return self.components.get(self.cursor.name)
        return None

    # ---- declarations ----

    def feed(self, decl: Declaration) -> None:
        if decl.type == SCOPE:
            self.open_scope(scope_class_name(decl.first_prop))
        elif decl.type == RULE:
            self._apply_rule(decl)

    def _apply_rule(self, decl: Declaration) -> None:
        component = self.current()
        selector = decl.first_prop
        if component is None or not selector:
            logger.debug("Ignoring rule %r outside any component", selector)
            return

        tag = _bound_tag(selector)
        if tag is not None:
            component.tag = tag
            return

        for match in extract_enum_attributes(selector):
            spec = component.data.setdefault(match.name, EnumAttribute(attribute=match.attribute))
            if isinstance(spec, EnumAttribute):
                spec.add(match.value or "")

        for match in extract_boolean_attributes(selector):
            component.data.setdefault(match.name, BooleanAttribute(attribute=match.attribute))

    def build(self, declarations: Iterable[Declaration]) -> Components:
        for decl in declarations:
            self.feed(decl)
        return self.components


def build_components(declarations: Iterable[Declaration]) -> Components:
    """Build the Components map from reduced declarations in one pass."""
    return ComponentBuilder().build(declarations)
