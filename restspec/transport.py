"""HTTP transport for the spec-driven REST client.

Handles:
  - Session management with configurable headers and User-Agent
  - Per-request authentication objects
  - Query string or body encoding per verb
  - Mapping requests failures and 4xx/5xx responses to TransportError
  - JSON response parsing

No retries and no timeout unless ``request_timeout`` is configured.
"""

import requests
import singer

from restspec import __version__
from restspec.errors import HttpStatusError, ResponseDecodeError, TransportError

LOGGER = singer.get_logger()

BODY_FORMATS = ("form", "json")


class HttpTransport:
    """Thin wrapper around a requests.Session."""

    def __init__(self, config=None):
        config = config or {}
        self.timeout = config.get("request_timeout")
        self.user_agent = config.get("user_agent", f"restspec/{__version__}")
        self.body_format = config.get("body_format", "form")
        if self.body_format not in BODY_FORMATS:
            raise ValueError(
                f"Unknown body_format: '{self.body_format}'. "
                f"Supported: {', '.join(BODY_FORMATS)}"
            )

        self._session = requests.Session()
        self._session.headers.update({
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        })
        global_headers = config.get("headers")
        if global_headers:
            self._session.headers.update(global_headers)

    def issue(self, method, url, query=None, body=None, auth=None):
        """Send one request and return the requests.Response.

        Raises:
            HttpStatusError: On 4xx/5xx responses.
            TransportError: On connection errors, timeouts and other
                requests failures.
        """
        kwargs = {"params": query or None, "auth": auth, "timeout": self.timeout}
        if body is not None:
            if self.body_format == "json":
                kwargs["json"] = body
            else:
                kwargs["data"] = body

        LOGGER.debug("REQUEST: %s %s query=%s body=%s",
                     method.upper(), url, query, sorted(body) if body else None)

        try:
            resp = self._session.request(method.upper(), url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method.upper()} {url} failed: {e}") from e

        if 400 <= resp.status_code < 600:
            kind = "Server" if resp.status_code >= 500 else "Client"
            raise HttpStatusError(
                resp.status_code,
                f"{kind} error {resp.status_code} for {method.upper()} {url}: "
                f"{resp.text[:500]}",
            )

        return resp

    @staticmethod
    def parse(resp):
        """Return the decoded JSON body, or None for an empty body."""
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            content_type = resp.headers.get("Content-Type", "")
            raise ResponseDecodeError(
                f"Expected JSON response but got {content_type}. "
                f"Status: {resp.status_code}. Body preview: {resp.text[:200]}"
            ) from e

    def request_json(self, method, url, query=None, body=None, auth=None):
        """Execute request and return parsed JSON."""
        return self.parse(self.issue(method, url, query=query, body=body, auth=auth))

    def close(self):
        self._session.close()
