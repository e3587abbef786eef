"""Exception types raised by the SEC EDGAR client."""


class EdgarError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(EdgarError):
    """Raised when a required setting, such as the User-Agent, is missing."""


class TransportError(EdgarError):
    """Raised when a request to EDGAR fails or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(EdgarError):
    """Raised when a feed, filing content or URL cannot be parsed."""


class NotFoundError(EdgarError):
    """Raised when a requested value does not exist."""


class CIKNotFoundError(NotFoundError):
    """Raised when a ticker is absent from the ticker dictionary."""

    def __init__(self, ticker: str) -> None:
        super().__init__(f"CIK for ticker '{ticker}' not found")
        self.ticker = ticker


class FilingContentNotFoundError(NotFoundError):
    """Raised when a feed entry has no content payload."""


class FilingContentValueNotFoundError(NotFoundError):
    """Raised when the filing content lacks one of the expected fields."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Filing content value '{field}' not found")
        self.field = field


class ValidationError(EdgarError, ValueError):
    """Raised when a caller-supplied value is not recognized."""


class TickerFileError(EdgarError, OSError):
    """Raised when the local ticker dictionary cannot be read."""
