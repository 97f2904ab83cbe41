class CheckerError(Exception):
    """Base class for failures that prevent a verdict."""


class ProtocolError(CheckerError):
    """The checker was invoked with the wrong parameter shape."""

    def __init__(self, param_count: int, message: str | None = None):
        self.param_count = param_count
        super().__init__(message or
                         f"expected 1 tolerance parameter, got {param_count}")


class InvalidToleranceError(ProtocolError):

    def __init__(self, eps: float):
        self.eps = eps
        super().__init__(1, f"tolerance must be a non-negative number: {eps!r}")


class InputFormatError(CheckerError):
    """The input stream is truncated or holds an unparsable token."""
