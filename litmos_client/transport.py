"""
RequestDispatcher: one authenticated HTTP call per verb invocation.

Wire format (Litmos API v1):
  - URL: https://api.<host>/v<version>.svc/<path>
  - Headers on every request: Content-Type / Accept application/json and the
    API key in the `apikey` header
  - The `source` site identifier travels in the query string on every verb
  - GET / DELETE: caller params go in the query string, no body
  - POST / PUT:   caller params are the JSON body; query_params (plus
    source) go in the query string

Responses are classified by outcome.classify().  Failures raise the typed
exception carrying the raw response; successes are normalised with
mapper.normalise_response() unless the caller passed dont_parse_response.

There are no retries, no caching and no local rate limiting: a 503 is
surfaced as RateLimited and the caller decides when to try again.  Network
errors from requests (ConnectionError, Timeout ...) propagate unchanged.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

import requests

from .config import Configuration
from .mapper import normalise_response
from .errors import ApiError
from .outcome import Failure, FailureKind, classify, raise_for_outcome

logger = logging.getLogger(__name__)

# Reserved parameter: return the raw body instead of the normalised value
SUPPRESS_FLAG = "dont_parse_response"

VERBS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})
_QUERY_ONLY_VERBS: frozenset[str] = frozenset({"GET", "DELETE"})

API_KEY_HEADER = "apikey"


# --------------------------------------------------------------------------- #
# Helpers                                                                      #
# --------------------------------------------------------------------------- #


def extract_suppress_flag(params: Any) -> tuple[Any, bool]:
    """
    Split the dont_parse_response entry off *params*.

    Returns (params_without_flag, flag).  The caller's mapping is never
    mutated; non-mapping params (e.g. a JSON array body) pass through.
    """
    if not isinstance(params, Mapping) or SUPPRESS_FLAG not in params:
        return params, False
    remaining = dict(params)
    flag = bool(remaining.pop(SUPPRESS_FLAG))
    return remaining, flag


def handle_response(response: requests.Response, dont_parse_response: bool = False) -> Any:
    """
    Turn a raw response into the value returned to the caller.

    Raises:
        NotFound: 404
        RateLimited: 503
        ApiError: any other non-success status, or a 200/201 whose body
            is not JSON

    Returns:
        True: 200/201 with an empty or blank body
        str: the raw body, when dont_parse_response is set
        dict | list | ...: the normalised JSON body otherwise
    """
    outcome = classify(response.status_code, response.text)

    if isinstance(outcome, Failure):
        if outcome.kind is FailureKind.RATE_LIMITED:
            logger.warning("Litmos rate limit exceeded (503) for %s", response.url)
        else:
            logger.error(
                "Litmos API call failed with %d (%s) for %s",
                outcome.status_code,
                outcome.kind.value,
                response.url,
            )
    success = raise_for_outcome(outcome, response)

    if success.is_empty:
        return True
    if dont_parse_response:
        return success.body
    try:
        return normalise_response(success.body)
    except json.JSONDecodeError as exc:
        logger.error("Litmos returned a non-JSON body with %d for %s", success.status_code, response.url)
        raise ApiError(response) from exc


def _query_value(value: Any) -> Any:
    """Booleans go on the wire as true/false; everything else is left to requests."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


# --------------------------------------------------------------------------- #
# Dispatcher                                                                   #
# --------------------------------------------------------------------------- #


class RequestDispatcher:
    """
    Builds and sends requests against the configured Litmos endpoint.

    The dispatcher holds only the frozen Configuration and a requests.Session,
    so it is as thread-safe as the session it is given.
    """

    def __init__(
        self,
        config: Configuration,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def session(self) -> requests.Session:
        return self._session

    def url_for(self, path: str) -> str:
        return f"{self._config.base_url}/{path.lstrip('/')}"

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            API_KEY_HEADER: self._config.api_key,
        }

    def dispatch(
        self,
        verb: str,
        path: str,
        params: Any = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Send one request and return the (normalised) result.

        Args:
            verb:          GET, POST, PUT or DELETE (case-insensitive).
            path:          Resource path relative to the base URL, e.g. "users/abc".
            params:        Query parameters for GET/DELETE, JSON body for POST/PUT.
            query_params:  Extra query parameters (meaningful for POST/PUT).
        """
        verb = verb.upper()
        if verb not in VERBS:
            raise ValueError(f"Unsupported HTTP verb: {verb!r}")

        params, suppress_in_params = extract_suppress_flag(params)
        query_params, suppress_in_query = extract_suppress_flag(query_params)
        dont_parse_response = suppress_in_params or suppress_in_query

        url = self.url_for(path)
        query: dict[str, Any] = dict(query_params or {})
        body: Optional[str] = None

        if verb in _QUERY_ONLY_VERBS:
            query = {**dict(params or {}), **query}
        else:
            body = json.dumps(params if params is not None else {})
        query = {key: _query_value(value) for key, value in query.items()}
        query["source"] = self._config.source

        logger.debug("Litmos request: %s %s params=%s", verb, url, sorted(query))

        response = self._session.request(
            verb,
            url,
            params=query,
            data=body,
            headers=self.headers(),
            timeout=self._config.timeout,
        )
        return handle_response(response, dont_parse_response)

    def close(self) -> None:
        """Close the session if this dispatcher created it."""
        if self._owns_session:
            self._session.close()
