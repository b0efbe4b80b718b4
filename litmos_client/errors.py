"""
Exception hierarchy for the Litmos client.

Callers catch precisely what they need:

  LitmosError
  ├── ConfigurationError   missing credentials, raised at construction
  ├── DateFormatError      a string that is not a /Date(...)/ literal
  └── ResponseError        the API answered with a non-success status
      ├── NotFound         404
      ├── RateLimited      503 (100 requests per rolling 60 s window)
      └── ApiError         every other status (400, 403, 409, 5xx ...)

Every ResponseError keeps the raw requests.Response so the caller can
inspect headers and body.  Network failures (DNS, refused connections,
timeouts) are requests exceptions and are never wrapped here.
"""

from typing import Optional

import requests


class LitmosError(Exception):
    """Base for all errors raised by this package."""


class ConfigurationError(LitmosError):
    """API key or source site missing or blank."""


class DateFormatError(LitmosError, ValueError):
    """Raised when a string is not a /Date(<ms><sign><offset>)/ literal."""


class ResponseError(LitmosError):
    """A response whose status code is not 200 or 201."""

    def __init__(
        self,
        response: Optional[requests.Response] = None,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        if response is not None:
            status_code = response.status_code if status_code is None else status_code
            body = response.text if body is None else body
        self.response = response
        self.status_code = status_code
        self.body = body
        message = f"Litmos API returned {self.status_code}"
        if self.body:
            message = f"{message}: {self.body}"
        super().__init__(message)


class NotFound(ResponseError):
    """404: the user, team or course does not exist."""


class RateLimited(ResponseError):
    """503: the rolling request quota is exhausted; back off before retrying."""


class ApiError(ResponseError):
    """Any other status: malformed request, bad API key, conflict, server error."""
