"""
Status code → outcome classification.

Litmos documents a small set of status codes:

  200  Success. User/course etc. updated, deleted or retrieved
  201  Success. User/course etc. created
  400  Bad Request. Check that the URI and request body are well formed
  403  Forbidden. Check the API key, HTTPS setting, source parameter etc.
  404  Not Found. The requested user/course etc. does not exist
  409  Conflict. Usually an attempt to create an item that already exists
  503  Service Unavailable. Rate limit exceeded (100 requests per rolling
       60 second window)

classify() is a pure function of (status_code, body).  The table is
exhaustive: any code other than 200, 201, 404 and 503 is an API error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import requests

from .errors import ApiError, NotFound, RateLimited, ResponseError

SUCCESS_CODES: frozenset[int] = frozenset({200, 201})
NOT_FOUND_CODE = 404
RATE_LIMITED_CODE = 503


class FailureKind(str, Enum):
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    API_ERROR = "api_error"


_EXCEPTIONS: dict[FailureKind, type[ResponseError]] = {
    FailureKind.NOT_FOUND: NotFound,
    FailureKind.RATE_LIMITED: RateLimited,
    FailureKind.API_ERROR: ApiError,
}


@dataclass(frozen=True)
class Success:
    status_code: int
    body: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.body is None or not self.body.strip()


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    status_code: int
    body: Optional[str] = None

    def to_exception(self, response: Optional[requests.Response] = None) -> ResponseError:
        """Build the typed exception for this failure, keeping the raw response."""
        error_cls = _EXCEPTIONS[self.kind]
        return error_cls(response, status_code=self.status_code, body=self.body)


Outcome = Union[Success, Failure]


def classify(status_code: int, body: Optional[str] = None) -> Outcome:
    if status_code in SUCCESS_CODES:
        return Success(status_code=status_code, body=body)
    if status_code == NOT_FOUND_CODE:
        return Failure(FailureKind.NOT_FOUND, status_code, body)
    if status_code == RATE_LIMITED_CODE:
        return Failure(FailureKind.RATE_LIMITED, status_code, body)
    return Failure(FailureKind.API_ERROR, status_code, body)


def raise_for_outcome(
    outcome: Outcome, response: Optional[requests.Response] = None
) -> Success:
    """Return *outcome* if it is a Success, otherwise raise its exception."""
    if isinstance(outcome, Failure):
        raise outcome.to_exception(response)
    return outcome
