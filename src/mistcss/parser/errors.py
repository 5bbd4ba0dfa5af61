"""Parser error types."""

from mistcss.errors import ParseFailure

__all__ = ["ParseFailure"]
