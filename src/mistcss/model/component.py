"""Component model: attribute specs, Component and the Components map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class EnumAttribute:
    """An attribute with a closed set of string values, in first-seen order.

    ``attribute`` is the stylesheet spelling (``col-2`` for ``[data-col-2]``)
    used for the rendered ``data-*`` binding; it does not take part in
    equality.
    """

    values: list[str] = field(default_factory=list)
    attribute: str = field(default="", compare=False)

    def add(self, value: str) -> None:
        if value not in self.values:
            self.values.append(value)


@dataclass(frozen=True)
class BooleanAttribute:
    """A presence-only attribute."""

    attribute: str = field(default="", compare=False)


AttributeSpec = Union[EnumAttribute, BooleanAttribute]


@dataclass
class Component:
    """A generated UI component: the element it renders and its data attributes."""

    tag: str = ""
    data: dict[str, AttributeSpec] = field(default_factory=dict)
    class_name: str = ""

    @property
    def is_bound(self) -> bool:
        return bool(self.tag)


Components = dict[str, Component]
