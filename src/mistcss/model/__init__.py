"""mistcss model layer -- public type re-exports."""

from mistcss.model.component import (
    AttributeSpec,
    BooleanAttribute,
    Component,
    Components,
    EnumAttribute,
)
from mistcss.model.node import DECL, RULE, SCOPE, CssNode, Declaration

__all__ = [
    # parse tree
    "CssNode",
    "Declaration",
    "RULE",
    "SCOPE",
    "DECL",
    # components
    "AttributeSpec",
    "EnumAttribute",
    "BooleanAttribute",
    "Component",
    "Components",
]
