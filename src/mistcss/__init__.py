"""mistcss: generate typed React components from scoped stylesheets."""

from mistcss.builder import ComponentBuilder, Has, NoCurrent, build_components
from mistcss.config import ComponentMode, MistConfig
from mistcss.driver import build_model, convert, gen_file
from mistcss.errors import InputPathError, MissingTagError, MistError, ParseFailure
from mistcss.generator import render
from mistcss.model import BooleanAttribute, Component, CssNode, EnumAttribute
from mistcss.parser import parse_css
from mistcss.reducer import reduce_tree

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # pipeline
    "parse_css",
    "reduce_tree",
    "build_components",
    "render",
    "build_model",
    "convert",
    "gen_file",
    # builder state
    "ComponentBuilder",
    "NoCurrent",
    "Has",
    # config
    "ComponentMode",
    "MistConfig",
    # model
    "CssNode",
    "Component",
    "EnumAttribute",
    "BooleanAttribute",
    # errors
    "MistError",
    "ParseFailure",
    "MissingTagError",
    "InputPathError",
]
