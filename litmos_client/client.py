"""
LitmosClient: the public facade.

    client = LitmosClient(api_key="...", source="mysite.example.com")
    users = client.list_users(search="bob")
    client.get("users/abc123", {"dont_parse_response": True})   # raw JSON text

The client validates its credentials once, at construction, and then only
forwards the four verbs to the RequestDispatcher.  Resource methods (users,
teams, courses) come from the mixins in resources.py and call the verbs.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

import requests

from .config import (
    API_VERSION,
    DEFAULT_HOST,
    DEFAULT_TIMEOUT,
    Configuration,
    configuration_from_env,
    load_configuration,
)
from .resources import CoursesMixin, TeamsMixin, UsersMixin
from .transport import RequestDispatcher

logger = logging.getLogger(__name__)


class LitmosClient(UsersMixin, TeamsMixin, CoursesMixin):
    """
    Synchronous Litmos API client.

    Raises ConfigurationError at construction if api_key or source is blank.
    Every verb either returns one value or raises one of NotFound,
    RateLimited or ApiError.
    """

    def __init__(
        self,
        api_key: str,
        source: str,
        *,
        api_version: str = API_VERSION,
        host: str = DEFAULT_HOST,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        config = load_configuration(
            api_key=api_key,
            source=source,
            api_version=api_version,
            host=host,
            timeout=timeout,
        )
        self._dispatcher = RequestDispatcher(config, session=session)
        logger.debug("Litmos client ready for %s (source=%r)", config.base_url, config.source)

    @classmethod
    def from_config(
        cls, config: Configuration, session: Optional[requests.Session] = None
    ) -> "LitmosClient":
        return cls(
            config.api_key,
            config.source,
            api_version=config.api_version,
            host=config.host,
            timeout=config.timeout,
            session=session,
        )

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None, **overrides: Any) -> "LitmosClient":
        """Build a client from LITMOS_* environment variables (or a .env file)."""
        return cls.from_config(configuration_from_env(**overrides), session=session)

    # ------------------------------------------------------------------ #
    # Configuration                                                        #
    # ------------------------------------------------------------------ #

    @property
    def config(self) -> Configuration:
        return self._dispatcher.config

    @property
    def base_url(self) -> str:
        return self.config.base_url

    # ------------------------------------------------------------------ #
    # Verbs                                                                #
    # ------------------------------------------------------------------ #

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._dispatcher.dispatch("GET", path, params)

    def post(
        self,
        path: str,
        params: Any = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self._dispatcher.dispatch("POST", path, params, query_params)

    def put(
        self,
        path: str,
        params: Any = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self._dispatcher.dispatch("PUT", path, params, query_params)

    def delete(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._dispatcher.dispatch("DELETE", path, params)

    # ------------------------------------------------------------------ #
    # Session lifecycle                                                    #
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> "LitmosClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
