"""Parse tree model: CssNode and the flat Declaration records."""

from __future__ import annotations

from dataclasses import dataclass

RULE = "rule"
SCOPE = "@scope"
DECL = "decl"


@dataclass(frozen=True)
class CssNode:
    """A node of the stylesheet parse tree.

    ``type`` is ``"rule"`` for selector blocks, ``"@<name>"`` for at-rules and
    ``"decl"`` for declarations.  ``props`` holds the ordered selector (or
    prelude) texts.
    """

    type: str
    props: tuple[str, ...] = ()
    children: tuple[CssNode, ...] = ()


@dataclass(frozen=True)
class Declaration:
    """A tree node kept by the reducer, without its children."""

    type: str
    props: tuple[str, ...]

    @property
    def first_prop(self) -> str | None:
        return self.props[0] if self.props else None
