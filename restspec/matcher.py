"""Find the spec resource a request refers to.

A resource can be requested by its name ("search") or by its path, either
as the template ("users/:id") or with concrete values ("users/42"). The
first resource in declaration order whose name or path matches, and that
allows the verb, wins.
"""

import logging
import re

from restspec.verbs import Verb

LOGGER = logging.getLogger(__name__)

MATCH_NAME = "name"
MATCH_PATH = "path"

_PARAM_SEGMENT_RE = re.compile(r":\w+")


def normalize_uri(uri):
    """Turn a resource name or path into an anchored regex.

    ``:param`` segments accept the placeholder itself or a concrete word,
    ``/`` is matched literally, and a leading ``/`` is optional.
    """
    pieces = _PARAM_SEGMENT_RE.split(uri.lstrip("/"))
    pattern = r"(:?\w+)".join(re.escape(piece) for piece in pieces)
    return re.compile("^/?" + pattern + r"\Z")


def segment_values(uri, resource):
    """Map the ``:param`` segments of ``uri`` to the concrete values in ``resource``.

    Segments still written as placeholders in ``resource`` are left out.

    >>> segment_values("users/:id", "users/42")
    {'id': '42'}
    """
    match = normalize_uri(uri).match(resource)
    if not match:
        return {}
    names = [segment[1:] for segment in _PARAM_SEGMENT_RE.findall(uri)]
    return {
        name: value
        for name, value in zip(names, match.groups())
        if not value.startswith(":")
    }


def match_resource(spec, verb, resource):
    """Return ``(resource_def, matched_on)`` for the first match, or ``(None, None)``.

    ``matched_on`` is MATCH_NAME or MATCH_PATH. The name is tried first.
    """
    verb = Verb.parse(verb)

    for candidate in spec.resources:
        if verb not in candidate.methods:
            continue
        if normalize_uri(candidate.name).match(resource):
            return candidate, MATCH_NAME
        if normalize_uri(candidate.path).match(resource):
            return candidate, MATCH_PATH

    LOGGER.debug("No resource in '%s' matches %s %s", spec.name, verb, resource)
    return None, None


def find_matching_resource(spec, verb, resource):
    """Return the first ResourceDef matching ``verb`` and ``resource``, or None."""
    candidate, _ = match_resource(spec, verb, resource)
    return candidate
