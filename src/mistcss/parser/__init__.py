from mistcss.parser.errors import ParseFailure
from mistcss.parser.tokenizer import CssTransformer, parse_css, split_selectors

__all__ = ["ParseFailure", "CssTransformer", "parse_css", "split_selectors"]
