"""Attribute matcher extraction from selector text.

Two independent scans run over a selector:

* enum matchers, ``[data-size='sm']`` (single, double or no quotes, with an
  optional ``i``/``s`` case flag), and
* boolean matchers, ``[data-disabled]``.

The scans never look at each other's results; classification policy (enum
first, boolean only when nothing else claimed the name) lives in the builder.
Matchers that fit neither shape are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "AttributeMatch",
    "extract_enum_attributes",
    "extract_boolean_attributes",
    "kebab_to_camel",
    "kebab_to_pascal",
]

_ENUM_RE = re.compile(
    r"""
    \[\s*data-(?P<attribute>[\w-]+?)       # attribute name after the data- prefix
    \s*=\s*
    (?:
        (?P<quote>["'])(?P<quoted>.*?)(?P=quote)
      | (?P<bare>[^\]\s'"]+)
    )
    (?:\s+[iIsS])?                         # case-sensitivity flag
    \s*\]
    """,
    re.VERBOSE,
)

_BOOLEAN_RE = re.compile(r"\[\s*data-(?P<attribute>[\w-]+)\s*\]")

_HYPHEN_RE = re.compile(r"-+([a-zA-Z0-9])")


@dataclass(frozen=True)
class AttributeMatch:
    """A single data-attribute matcher found in a selector.

    ``attribute`` is the name as written after ``data-``; ``value`` is
    ``None`` for boolean matchers.
    """

    attribute: str
    value: str | None = None

    @property
    def name(self) -> str:
        """The camelCase prop name, ``is-active`` -> ``isActive``."""
        return kebab_to_camel(self.attribute)


def kebab_to_camel(name: str) -> str:
    """``is-active`` -> ``isActive``."""
    return _HYPHEN_RE.sub(lambda m: m.group(1).upper(), name).replace("-", "")


def kebab_to_pascal(name: str) -> str:
    """``my-button`` -> ``MyButton``."""
    camel = kebab_to_camel(name)
    return camel[:1].upper() + camel[1:]


def extract_enum_attributes(selector: str) -> list[AttributeMatch]:
    """Return every ``[data-name='value']`` matcher in *selector*, in order."""
    matches = []
    for m in _ENUM_RE.finditer(selector):
        value = m.group("quoted") if m.group("quote") else m.group("bare")
        matches.append(AttributeMatch(attribute=m.group("attribute"), value=value))
    return matches


def extract_boolean_attributes(selector: str) -> list[AttributeMatch]:
    """Return every bare ``[data-name]`` matcher in *selector*, in order."""
    return [AttributeMatch(attribute=m.group("attribute")) for m in _BOOLEAN_RE.finditer(selector)]
