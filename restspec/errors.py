"""Exceptions raised by the spec-driven REST client.

Every failure is raised synchronously to the caller. Nothing here is
retried or recovered locally.
"""


class RestSpecError(Exception):
    """Base error for everything raised by restspec."""


class SpecError(RestSpecError):
    """A spec file or spec dict is malformed, or the spec dir is missing."""


class DuplicateSpecName(RestSpecError):
    """A spec with this name is already registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Spec with name '{name}' already exists.")


class SpecNotFound(RestSpecError):
    """use_spec() was called with a name nobody registered."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f"Cannot use '{name}'. Load or add this spec before calling use_spec()."
        )


class NoActiveSpec(RestSpecError):
    """A request was dispatched before use_spec()."""

    def __init__(self):
        super().__init__("No active spec. Call use_spec() before dispatching requests.")


class ResourceNotSupported(RestSpecError):
    """No resource in the active spec matches the verb and resource."""

    def __init__(self, verb, resource, spec_name):
        self.verb = verb
        self.resource = resource
        self.spec_name = spec_name
        super().__init__(
            f"{str(verb).upper()} {resource} not supported for API '{spec_name}'. "
            "Make sure the spec is correct, or use_spec() the correct API."
        )


class UnsupportedVerb(RestSpecError, ValueError):
    """The verb is not one of get, post, put, patch, delete."""

    def __init__(self, verb):
        self.verb = verb
        super().__init__(f"Trying to call an invalid verb '{verb}'")


class BindError(RestSpecError):
    """Base error for parameter binding failures."""

    def __init__(self, key, message):
        self.key = key
        super().__init__(message)


class MissingRequiredParam(BindError):
    def __init__(self, key):
        super().__init__(
            key,
            f"Invalid request: params must have '{key}'. "
            "It is listed as a required parameter in the spec.",
        )


class MissingPathParam(BindError):
    def __init__(self, key):
        super().__init__(
            key, f"Params are missing a required parameter from url path: {key}."
        )


class AuthError(RestSpecError):
    """Raised when credentials are incomplete."""


class TransportError(RestSpecError):
    """The HTTP call failed. The underlying exception is kept as __cause__."""


class HttpStatusError(TransportError):
    """The server answered with a 4xx or 5xx status."""

    def __init__(self, status_code, message):
        self.status_code = status_code
        super().__init__(message)


class ResponseDecodeError(TransportError):
    """The response body was not valid JSON."""
