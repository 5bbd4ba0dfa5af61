"""File driver: stylesheet file in, generated component file out."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from mistcss.builder import ComponentBuilder
from mistcss.config import ComponentMode, MistConfig
from mistcss.errors import InputPathError, ParseFailure
from mistcss.generator import render
from mistcss.model.component import Components
from mistcss.model.node import RULE, CssNode
from mistcss.parser import parse_css
from mistcss.reducer import DEFAULT_KINDS, reduce_tree

__all__ = [
    "INPUT_SUFFIX",
    "OUTPUT_SUFFIX",
    "Tokenizer",
    "build_model",
    "convert",
    "gen_file",
    "module_name_for",
    "output_path_for",
]

logger = logging.getLogger(__name__)

INPUT_SUFFIX = ".mist.css"
OUTPUT_SUFFIX = ".mist.tsx"

Tokenizer = Callable[[str], Sequence[CssNode]]


def module_name_for(path: str | Path) -> str:
    """``src/my-button.mist.css`` -> ``my-button``."""
    base = Path(path).name
    if not base.endswith(INPUT_SUFFIX) or base == INPUT_SUFFIX:
        raise InputPathError(f"Expected a '*{INPUT_SUFFIX}' file, got {base!r}")
    return base[: -len(INPUT_SUFFIX)]


def output_path_for(path: str | Path) -> Path:
    """``button.mist.css`` -> ``button.mist.tsx`` in the same directory."""
    src = Path(path)
    return src.with_name(module_name_for(src) + OUTPUT_SUFFIX)


def build_model(
    source: str,
    module_name: str,
    config: MistConfig | None = None,
    tokenizer: Tokenizer = parse_css,
) -> Components:
    """Tokenize, reduce and build the Components map for *source*."""
    config = config or MistConfig()
    tree = tokenizer(source)

    builder = ComponentBuilder()
    if config.mode is ComponentMode.SINGLE:
        declarations = reduce_tree(tree, kinds={RULE})
        name = builder.open_scope(module_name)
        components = builder.build(declarations)
        if not components[name].is_bound:
            raise ParseFailure("Could not parse tag")
        return components

    return builder.build(reduce_tree(tree, kinds=DEFAULT_KINDS))


def convert(
    source: str,
    module_name: str,
    config: MistConfig | None = None,
    tokenizer: Tokenizer = parse_css,
) -> str:
    """Convert stylesheet text into generated component source."""
    components = build_model(source, module_name, config, tokenizer)
    logger.debug("Rendering %d component(s) for %s", len(components), module_name)
    return render(components, module_name)


def gen_file(
    path: str | Path,
    config: MistConfig | None = None,
    tokenizer: Tokenizer = parse_css,
) -> Path:
    """Generate ``<module>.mist.tsx`` next to *path* and return its path.

    The output is rendered in full before anything is written, so a failing
    conversion leaves any previous output untouched.
    """
    config = config or MistConfig()
    src = Path(path)
    module_name = module_name_for(src)
    source = src.read_text(encoding=config.encoding)
    code = convert(source, module_name, config, tokenizer)

    out = output_path_for(src)
    out.write_text(code + "\n", encoding=config.encoding)
    logger.info("Wrote %s", out)
    return out
