"""Spec-driven REST client.

Requests are addressed by resource instead of URL:

    client = SpecClient()
    client.use_spec("fb")
    results = client.get("search", {"q": "coffee", "access_token": token})

The active spec decides which resources exist, which verbs they allow,
which params they require and how the final URL is built.
"""

import singer

from restspec.auth import BasicAuth, OAuth1Auth, resolve_auth
from restspec.binder import bind_params
from restspec.errors import NoActiveSpec, ResourceNotSupported
from restspec.matcher import MATCH_PATH, match_resource, segment_values
from restspec.store import DEFAULT_SPEC_DIR, SpecStore
from restspec.transport import HttpTransport
from restspec.verbs import BODY_VERBS, Verb

LOGGER = singer.get_logger()


def build_url(api_root, path):
    """Join the spec's api_root and a bound resource path."""
    return f"{api_root.rstrip('/')}/{path.lstrip('/')}"


class SpecClient:
    """Dispatches requests against the active API spec.

    The active spec and auth are plain attributes written by use_spec(),
    set_auth() and set_oauth(). Callers sharing a client across threads
    must serialize those calls, or clone() the client per session.
    """

    def __init__(self, config=None, store=None, transport=None):
        self.config = config or {}
        if store is None:
            store = SpecStore()
            store.load(self.config.get("spec_dir") or DEFAULT_SPEC_DIR)
        self.store = store
        self.transport = transport or HttpTransport(self.config)

        self.active_spec = None
        self._basic_auth = None
        self._oauth = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def use_spec(self, name):
        """Make the spec registered as ``name`` the active one."""
        self.active_spec = self.store.get(name)
        LOGGER.info("Using spec '%s' (%s)", name, self.active_spec.api_root)
        return self

    def add_spec(self, spec):
        """Register an ApiSpec or a decoded spec dict."""
        self.store.add(spec)
        return self

    def set_auth(self, auth):
        """Set basic auth credentials ``{"user": ..., "pass": ...}``. None clears them."""
        self._basic_auth = BasicAuth(auth) if auth is not None else None
        self._warn_on_auth_conflict()
        return self

    def set_oauth(self, oauth):
        """Set OAuth 1.0a credentials. None clears them.

        Keys: consumer_key, consumer_secret, token, token_secret.
        """
        self._oauth = OAuth1Auth(oauth) if oauth is not None else None
        self._warn_on_auth_conflict()
        return self

    def _warn_on_auth_conflict(self):
        if self._basic_auth is not None and self._oauth is not None:
            LOGGER.warning("Both basic auth and OAuth are configured; OAuth will be used")

    @property
    def auth(self):
        """The handler applied to the next request."""
        return resolve_auth(self._basic_auth, self._oauth)

    def clone(self):
        """Return a client sharing the store and transport but not the active spec or auth."""
        other = SpecClient(self.config, store=self.store, transport=self.transport)
        other.active_spec = self.active_spec
        other._basic_auth = self._basic_auth
        other._oauth = self._oauth
        return other

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def request(self, verb, resource, params=None, callback=None):
        """Send ``verb`` to ``resource`` of the active spec.

        Args:
            verb: A Verb or one of "get", "post", "put", "patch", "delete".
            resource: Resource name ("search") or path ("users/:id", "users/42").
            params: Dict of params. Path params are taken out; the rest go in
                the query string (get) or body (post, put, patch). Not modified.
            callback: Optional callable receiving the parsed response.

        Returns:
            The parsed JSON response, or None when a callback is given.

        Raises:
            UnsupportedVerb, NoActiveSpec, ResourceNotSupported,
            MissingRequiredParam, MissingPathParam: Before any HTTP call.
            TransportError: When the HTTP call fails.
        """
        verb = Verb.parse(verb)
        spec = self.active_spec
        if spec is None:
            raise NoActiveSpec()

        resource_def, matched_on = match_resource(spec, verb, resource)
        if resource_def is None:
            raise ResourceNotSupported(verb, resource, spec.name)

        if matched_on == MATCH_PATH:
            template = "/" + resource.lstrip("/")
        else:
            # Values written into a templated name fill the declared path
            template = resource_def.path
            captured = {
                key: value
                for key, value in segment_values(resource_def.name, resource).items()
                if key in resource_def.path_params
            }
            if captured:
                params = {**captured, **(params or {})}

        bound = bind_params(resource_def, template, params)
        url = build_url(spec.api_root, bound.path)

        query = body = None
        if verb in BODY_VERBS:
            body = bound.params
        elif verb == Verb.GET:
            query = bound.params
        elif bound.params:
            LOGGER.debug("DELETE %s sends no params; ignoring %s", url, sorted(bound.params))

        response = self.transport.request_json(
            verb.value, url, query=query, body=body, auth=self.auth.requests_auth()
        )

        if callback is not None:
            callback(response)
            return None
        return response

    def get(self, resource, params=None, callback=None):
        return self.request(Verb.GET, resource, params, callback)

    def post(self, resource, params=None, callback=None):
        return self.request(Verb.POST, resource, params, callback)

    def put(self, resource, params=None, callback=None):
        return self.request(Verb.PUT, resource, params, callback)

    def patch(self, resource, params=None, callback=None):
        return self.request(Verb.PATCH, resource, params, callback)

    def delete(self, resource, params=None, callback=None):
        return self.request(Verb.DELETE, resource, params, callback)
