"""Lark Transformer that converts stylesheet text into a CssNode tree."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from mistcss.model.node import DECL, RULE, CssNode
from mistcss.parser.errors import ParseFailure

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_STRING_RE = re.compile(r"""("(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')""", re.DOTALL)
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_AT_RULE_RE = re.compile(r"@(?P<name>[\w-]+)\s*(?P<prelude>.*)", re.DOTALL)

_OPENERS = {"(": ")", "[": "]"}


def _clean(token: Token) -> str:
    """Drop inline comments and collapse whitespace runs outside quoted strings."""
    parts = _STRING_RE.split(str(token))
    # split() with one capture group puts the strings at odd indexes
    for i in range(0, len(parts), 2):
        parts[i] = re.sub(r"\s+", " ", _COMMENT_RE.sub(" ", parts[i]))
    return "".join(parts).strip()


def split_selectors(text: str) -> list[str]:
    """Split a selector list on top-level commas.

    Commas inside brackets, parentheses or quoted strings do not separate
    selectors: ``a[data-x='1,2'], b`` yields ``["a[data-x='1,2']", "b"]``.
    """
    parts: list[str] = []
    closers: list[str] = []
    quote = ""
    start = 0
    for i, ch in enumerate(text):
        if quote:
            if ch == quote:
                quote = ""
        elif ch in ("'", '"'):
            quote = ch
        elif ch in _OPENERS:
            closers.append(_OPENERS[ch])
        elif closers and ch == closers[-1]:
            closers.pop()
        elif ch == "," and not closers:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return [p.strip() for p in parts if p.strip()]


def _at_rule(prelude: str, children: tuple[CssNode, ...] = ()) -> CssNode:
    match = _AT_RULE_RE.match(prelude)
    if match is None:
        # bare "@"
        return CssNode(type="@", props=(), children=children)
    rest = match.group("prelude").strip()
    return CssNode(
        type="@" + match.group("name").lower(),
        props=(rest,) if rest else (),
        children=children,
    )


def _declaration(text: str) -> CssNode:
    if text.startswith("@"):
        return _at_rule(text)
    name, sep, value = text.partition(":")
    if not sep:
        return CssNode(type=DECL, props=(text,))
    return CssNode(type=DECL, props=(name.strip(), value.strip()))


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into CssNode objects."""

    def statement(self, items: list[Token]) -> CssNode:
        return _declaration(_clean(items[0]))

    def trailing(self, items: list[Token]) -> CssNode:
        return _declaration(_clean(items[0]))

    def block(self, items: list[object]) -> CssNode:
        prelude = _clean(items[0])  # type: ignore[arg-type]
        children = tuple(item for item in items[1:] if isinstance(item, CssNode))
        if prelude.startswith("@"):
            return _at_rule(prelude, children)
        return CssNode(type=RULE, props=tuple(split_selectors(prelude)), children=children)

    def start(self, items: list[object]) -> tuple[CssNode, ...]:
        return tuple(item for item in items if isinstance(item, CssNode))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_css(source: str) -> tuple[CssNode, ...]:
    """Parse stylesheet source into its top-level CssNode forest."""
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseFailure(str(e), line=line, column=column) from e
    return CssTransformer().transform(tree)
