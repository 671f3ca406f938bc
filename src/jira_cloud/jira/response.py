"""Response envelope returned alongside every decoded result."""

import json
from dataclasses import dataclass, field
from typing import Any

import requests


@dataclass(frozen=True)
class JiraResponse:
    """Status code, raw body and endpoint of one Jira API call.

    The envelope is built for every response, including failed ones, so callers
    can inspect what Jira sent back even when decoding or the call itself failed.
    """

    status_code: int
    body: bytes
    endpoint: str
    method: str
    raw: requests.Response | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        """Whether the status code is in the 2xx range."""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """The body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON.

        Returns:
            The parsed JSON document, or None for an empty body

        Raises:
            ValueError: If the body is not valid JSON
        """
        if not self.body:
            return None
        return json.loads(self.body)
