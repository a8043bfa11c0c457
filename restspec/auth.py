"""Authentication handlers for the spec-driven REST client.

Supported methods:
  - no auth:  Requests go out unsigned
  - basic:    HTTP Basic Authentication (user/pass)
  - oauth:    OAuth 1.0a request signing (consumer key/secret + token/secret)

At most one handler is active per request. When a client has both basic
and OAuth credentials configured, OAuth wins.
"""

from requests.auth import HTTPBasicAuth
from requests_oauthlib import OAuth1

from restspec.errors import AuthError

BASIC_KEYS = ("user", "pass")
OAUTH_KEYS = ("consumer_key", "consumer_secret", "token", "token_secret")


def _check_keys(config, keys, method):
    if not isinstance(config, dict):
        raise AuthError(f"{method} credentials must be a dict with keys: {', '.join(keys)}")
    missing = [k for k in keys if config.get(k) is None]
    if missing:
        raise AuthError(f"{method} credentials are missing: {', '.join(missing)}")


class NoAuth:
    """No authentication -- pass-through."""

    name = "none"

    def requests_auth(self):
        return None


class BasicAuth:
    """HTTP Basic Authentication.

    Config keys:
        user - The username
        pass - The password
    """

    name = "basic"

    def __init__(self, config):
        _check_keys(config, BASIC_KEYS, "Basic auth")
        self.username = config["user"]
        self.password = config["pass"]

    def requests_auth(self):
        return HTTPBasicAuth(self.username, self.password)

    def __repr__(self):
        return f"BasicAuth(user={self.username!r})"


class OAuth1Auth:
    """OAuth 1.0a signing of every request (HMAC-SHA1).

    Config keys:
        consumer_key    - Application key
        consumer_secret - Application secret
        token           - User access token
        token_secret    - User access token secret
    """

    name = "oauth"

    def __init__(self, config):
        _check_keys(config, OAUTH_KEYS, "OAuth")
        self.consumer_key = config["consumer_key"]
        self.consumer_secret = config["consumer_secret"]
        self.token = config["token"]
        self.token_secret = config["token_secret"]

    def requests_auth(self):
        return OAuth1(
            self.consumer_key,
            client_secret=self.consumer_secret,
            resource_owner_key=self.token,
            resource_owner_secret=self.token_secret,
        )

    def __repr__(self):
        return f"OAuth1Auth(consumer_key={self.consumer_key!r})"


def resolve_auth(basic=None, oauth=None):
    """Pick the handler to apply: OAuth, then basic, then none."""
    if oauth is not None:
        return oauth
    if basic is not None:
        return basic
    return NoAuth()
