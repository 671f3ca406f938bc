"""Base client module for Jira Cloud API interactions.

Every service builds its request with `JiraClient.new_request` and sends it
with `JiraClient.call`; those two methods are the only place that touches the
network.
"""

import json
import logging
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from requests import PreparedRequest, Request, Session
from requests.auth import AuthBase, HTTPBasicAuth
from requests.utils import should_bypass_proxies

from ..exceptions import (
    JiraAuthenticationError,
    JiraDecodeError,
    JiraHTTPError,
    JiraValidationError,
)
from ..models.base import ApiModel
from ..utils.logging import log_config_param
from ..utils.urls import join_url
from .config import JiraConfig
from .response import JiraResponse

logger = logging.getLogger("jira-cloud")


class BearerAuth(AuthBase):
    """Attaches an OAuth access token or personal access token to a request."""

    def __init__(self, token: str) -> None:
        self.token = token

    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        request.headers["Authorization"] = f"Bearer {self.token}"
        return request


@lru_cache(maxsize=64)
def _type_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop unset query parameters and stringify the rest.

    None, empty strings and empty lists are omitted. Lists are kept so that
    requests encodes them as repeated keys; booleans become ``true``/``false``.
    Insertion order is preserved.
    """
    cleaned: dict[str, Any] = {}
    for key, value in (params or {}).items():
        if value is None or (isinstance(value, str | list | tuple) and not value):
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, list | tuple):
            cleaned[key] = [str(item) for item in value]
        else:
            cleaned[key] = str(value)
    return cleaned


def _serialize_payload(payload: Any) -> str:
    """Serialize a request payload to a JSON string.

    Args:
        payload: An API model, or any JSON-serializable value

    Returns:
        The JSON document

    Raises:
        JiraValidationError: If the payload cannot be serialized
    """
    if isinstance(payload, ApiModel):
        payload = payload.to_api_payload()
    try:
        return json.dumps(payload)
    except (TypeError, ValueError) as e:
        error_msg = f"jira: unable to serialize the payload: {e}"
        raise JiraValidationError(error_msg) from e


class JiraClient:
    """Base client for Jira Cloud API interactions.

    The client owns the configuration and the HTTP session. Services keep a
    reference to the client, so credentials changed through the setters are
    seen by every service. The setters are meant for setup time; calls made
    concurrently only read the configuration.
    """

    config: JiraConfig
    session: Session

    def __init__(
        self, config: JiraConfig | None = None, session: Session | None = None
    ) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            session: Optional requests session to send requests through

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()
        self.session = session or Session()

        if not self.config.ssl_verify:
            logger.warning(
                "Jira SSL verification disabled. This is insecure and should only be used in testing environments."
            )

        log_config_param(logger, "URL", self.config.url)
        log_config_param(logger, "auth type", self.config.auth_type)
        log_config_param(logger, "username", self.config.username)
        log_config_param(logger, "API token", self.config.api_token, sensitive=True)
        log_config_param(
            logger, "personal token", self.config.personal_token, sensitive=True
        )

    def set_basic_auth(self, username: str, api_token: str) -> None:
        """Authenticate with an account email and an API token.

        Args:
            username: The account email
            api_token: An API token created for that account
        """
        self.config.auth_type = "basic"
        self.config.username = username
        self.config.api_token = api_token

    def set_bearer_token(self, token: str) -> None:
        """Authenticate with a bearer token.

        Args:
            token: An OAuth 2.0 access token or a personal access token
        """
        self.config.auth_type = "token"
        self.config.personal_token = token

    def set_user_agent(self, user_agent: str) -> None:
        """Set the User-Agent header sent with every request."""
        self.config.user_agent = user_agent

    def _auth(self) -> AuthBase:
        if not self.config.is_auth_configured():
            error_msg = f"jira: {self.config.auth_type} authentication is not configured"
            raise JiraAuthenticationError(error_msg)

        if self.config.auth_type == "token":
            return BearerAuth(self.config.personal_token)
        return HTTPBasicAuth(self.config.username, self.config.api_token)

    def new_request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        payload: Any = None,
        headers: dict[str, str] | None = None,
    ) -> PreparedRequest:
        """
        Build a request against the configured site.

        Args:
            method: The HTTP method
            path: The API path relative to the site URL
            params: Optional query parameters; unset values are not sent
            payload: Optional body, serialized to JSON
            headers: Optional headers overriding the defaults

        Returns:
            The prepared request, ready for `call`

        Raises:
            JiraAuthenticationError: If no credentials are configured
            JiraValidationError: If the payload cannot be serialized
        """
        request_headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }

        data = None
        if payload is not None:
            data = _serialize_payload(payload)
            request_headers["Content-Type"] = "application/json"

        if headers:
            request_headers.update(headers)

        request = Request(
            method=method.upper(),
            url=join_url(self.config.url, path),
            headers=request_headers,
            params=_clean_params(params),
            data=data,
            auth=self._auth(),
        )
        return self.session.prepare_request(request)

    def call(
        self, request: PreparedRequest, target: Any = None
    ) -> tuple[Any, JiraResponse]:
        """
        Send a prepared request and decode its response.

        Args:
            request: A request built by `new_request`
            target: Optional type to decode the JSON body into, e.g. a model
                class, ``list[Model]`` or ``Any`` for untyped JSON

        Returns:
            A tuple of the decoded result (None without a target or for an
            empty body) and the response envelope

        Raises:
            JiraHTTPError: If Jira answers with a non-2xx status code
            JiraDecodeError: If the body does not decode into `target`
            requests.exceptions.RequestException: If the request cannot complete
        """
        settings = self.session.merge_environment_settings(
            request.url, self.config.proxies, None, self.config.ssl_verify, None
        )
        # Environment proxies are merged in above, so the bypass applies last
        if self.config.no_proxy and should_bypass_proxies(
            request.url, no_proxy=self.config.no_proxy
        ):
            settings["proxies"] = {}
        raw = self.session.send(request, timeout=self.config.timeout, **settings)

        response = JiraResponse(
            status_code=raw.status_code,
            body=raw.content or b"",
            endpoint=request.url,
            method=request.method,
            raw=raw,
        )
        logger.debug(f"{response.method} {response.endpoint} -> {response.status_code}")

        if not response.ok:
            error_msg = f"jira: {response.method} {response.endpoint} returned HTTP {response.status_code}"
            raise JiraHTTPError(error_msg, response)

        if target is None or not response.body:
            return None, response

        try:
            data = response.json()
        except ValueError as e:
            error_msg = f"jira: response from {response.endpoint} is not valid JSON: {e}"
            raise JiraDecodeError(error_msg, response) from e

        try:
            result = _type_adapter(target).validate_python(data)
        except ValidationError as e:
            error_msg = f"jira: unexpected response shape from {response.endpoint}: {e}"
            raise JiraDecodeError(error_msg, response) from e

        return result, response
