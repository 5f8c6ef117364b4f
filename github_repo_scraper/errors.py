"""Errors raised while fetching and exporting repositories."""


class ScraperError(Exception):
    """Base class for scraper errors."""


class RemoteError(ScraperError):
    """The API answered with a status other than 200."""

    def __init__(self, status: int, body: str):
        super().__init__(f"API request failed with status code {status}: {body}")
        self.status = status
        self.body = body


class DecodeError(ScraperError):
    """A page body could not be decoded into repositories."""


class ConfigError(ScraperError, ValueError):
    """Unknown target kind or output format."""
