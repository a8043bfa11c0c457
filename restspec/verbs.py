"""HTTP verbs the client can dispatch."""

from enum import Enum

from restspec.errors import UnsupportedVerb


class Verb(str, Enum):
    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"

    @classmethod
    def parse(cls, value):
        """Return the Verb for ``value`` or raise UnsupportedVerb. Verbs are lowercase."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedVerb(value) from None

    def __str__(self):
        return self.value


# Verbs whose remaining params travel in the request body
BODY_VERBS = frozenset({Verb.POST, Verb.PUT, Verb.PATCH})
