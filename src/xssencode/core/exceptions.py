class XSSEncodeError(Exception):
    """Base class for xssencode errors."""

    pass


class UnknownContextError(XSSEncodeError, ValueError):
    """Raised when an output context name is not recognised."""

    def __init__(self, context: str):
        self.context = context
        super().__init__(f"Unknown output context: {context!r}")
