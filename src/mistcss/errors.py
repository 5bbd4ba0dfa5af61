"""Error types raised while converting stylesheets into components."""


class MistError(Exception):
    """Base class for every error raised by mistcss."""


class ParseFailure(MistError):
    """Raised when a stylesheet cannot be turned into a component model."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class MissingTagError(ParseFailure):
    """Raised when a component has no tag binding at render time."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(
            f"Component {component!r} has no tag binding (expected a '<tag>:scope' rule)"
        )


class InputPathError(MistError):
    """Raised when an input file name does not end in ``.mist.css``."""
