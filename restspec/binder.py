"""Validate request params against a resource and fill in path params."""

from collections import namedtuple
from urllib.parse import quote as url_quote

from restspec.errors import MissingPathParam, MissingRequiredParam
from restspec.spec import PATH_PARAM_RE

BoundRequest = namedtuple("BoundRequest", ["path", "params"])


def bind_params(resource_def, path_template, params):
    """Check required params and substitute ``/:name`` segments of ``path_template``.

    Args:
        resource_def: The matched ResourceDef.
        path_template: Path to fill in, e.g. "/users/:id".
        params: Caller's params. Not modified.

    Returns:
        BoundRequest(path, params) where ``params`` no longer holds the
        keys consumed by the path. Keys the spec does not declare are kept.

    Raises:
        MissingRequiredParam: A param flagged "required" is absent.
        MissingPathParam: A ``:name`` segment has no value in params.
    """
    params = dict(params or {})

    # A None value counts as absent
    for key in resource_def.required_params:
        if params.get(key) is None:
            raise MissingRequiredParam(key)

    path_params = PATH_PARAM_RE.findall(path_template)
    for key in path_params:
        if params.get(key) is None:
            raise MissingPathParam(key)

    # Values are URL-encoded so they cannot add segments or a query
    values = {key: url_quote(str(params[key]), safe="") for key in path_params}
    path = PATH_PARAM_RE.sub(lambda m: "/" + values[m.group(1)], path_template)

    for key in values:
        del params[key]

    return BoundRequest(path, params)
