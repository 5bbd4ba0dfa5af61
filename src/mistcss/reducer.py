"""Flatten a CssNode forest into the ordered declarations the builder consumes."""

from __future__ import annotations

from collections.abc import Iterable

from mistcss.model.node import RULE, SCOPE, CssNode, Declaration

__all__ = ["DEFAULT_KINDS", "reduce_tree"]

DEFAULT_KINDS: frozenset[str] = frozenset({SCOPE, RULE})


def reduce_tree(
    nodes: Iterable[CssNode], kinds: Iterable[str] = DEFAULT_KINDS
) -> list[Declaration]:
    """Walk *nodes* pre-order and keep recognized kinds that carry props.

    Children are always visited, even below nodes that are filtered out, so
    declarations nested in unrelated wrappers (``@media``, ``@layer``...) are
    still found.  Document order is preserved.
    """
    wanted = frozenset(kinds)
    out: list[Declaration] = []
    _visit(nodes, wanted, out)
    return out


def _visit(nodes: Iterable[CssNode], kinds: frozenset[str], out: list[Declaration]) -> None:
    for node in nodes:
        if node.type in kinds and node.props:
            out.append(Declaration(type=node.type, props=tuple(node.props)))
        if node.children:
            _visit(node.children, kinds, out)
