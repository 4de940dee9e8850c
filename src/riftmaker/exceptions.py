"""Exceptions raised by the Riftmaker pipeline."""

from typing import Optional


class RiftmakerError(Exception):
    """Base class for every fatal pipeline error."""


class HttpRequestError(RiftmakerError):
    """Raised when a remote fetch does not complete successfully.

    Covers both non-success HTTP statuses and transport-level failures
    (connection errors, timeouts). ``status_code`` is None for the latter.
    """

    def __init__(self, url: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"HTTP {status_code} for {url}"
        else:
            message = f"Request to {url} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnexpectedResponseError(RiftmakerError):
    """Raised when a response body is not the JSON shape the pipeline consumes."""

    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"Unexpected response from {url}: {detail}")


class ConfigError(RiftmakerError):
    """Raised when a configuration file cannot be loaded."""
