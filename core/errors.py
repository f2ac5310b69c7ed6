"""Error types raised by the portfolio's state layer.

Every failure here is local: callers log or surface it and carry on.
"""


class PortfolioError(Exception):
    """Base class for all portfolio errors."""


class NavigationTargetMissing(PortfolioError):
    """A scroll was requested for a section that has no registered anchor."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No anchor registered for section '{name}'")


class LinkOpenFailed(PortfolioError):
    """The platform reported that it could not open a URI."""

    def __init__(self, uri: str, reason: str = "") -> None:
        self.uri = uri
        self.reason = reason
        message = f"Could not open '{uri}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
