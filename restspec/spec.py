"""API spec value objects.

A spec file describes one API:

    {
        "name": "fb",
        "api_root": "https://graph.facebook.com",
        "resources": [
            {
                "name": "search",
                "path": "/search",
                "methods": ["get"],
                "params": {"q": "required", "type": "optional"}
            }
        ]
    }

Specs are validated when they are built, so a malformed file fails at
load time instead of at request time. Built specs are not modified.
"""

import json
import os
import re
from types import MappingProxyType

from restspec.errors import SpecError, UnsupportedVerb
from restspec.verbs import Verb

REQUIRED = "required"
OPTIONAL = "optional"
PARAM_REQUIREMENTS = (REQUIRED, OPTIONAL)

PATH_PARAM_RE = re.compile(r"/:(\w+)")


class ResourceDef:
    """One resource of a spec: a name, a path template, verbs and params."""

    __slots__ = ("_name", "_path", "_methods", "_params")

    def __init__(self, name, path, methods, params=None):
        self._name = name
        self._path = path
        self._methods = frozenset(Verb.parse(m) for m in methods)
        self._params = MappingProxyType(dict(params or {}))

    @property
    def name(self):
        return self._name

    @property
    def path(self):
        return self._path

    @property
    def methods(self):
        return self._methods

    @property
    def params(self):
        return self._params

    @property
    def required_params(self):
        return [key for key, flag in self._params.items() if flag == REQUIRED]

    @property
    def path_params(self):
        """Names of the ``:param`` segments in ``path``, in order."""
        return PATH_PARAM_RE.findall(self._path)

    def allows(self, verb):
        return Verb.parse(verb) in self._methods

    @classmethod
    def from_dict(cls, data, spec_name="?"):
        if not isinstance(data, dict):
            raise SpecError(f"Spec '{spec_name}': each resource must be an object")

        for key in ("name", "path"):
            if not isinstance(data.get(key), str) or not data[key]:
                raise SpecError(
                    f"Spec '{spec_name}': resource is missing a string '{key}': {data!r}"
                )

        methods = data.get("methods")
        if not isinstance(methods, list) or not methods:
            raise SpecError(
                f"Spec '{spec_name}': resource '{data['name']}' needs a non-empty "
                f"'methods' list"
            )
        try:
            parsed_methods = [Verb.parse(m) for m in methods]
        except UnsupportedVerb as e:
            raise SpecError(
                f"Spec '{spec_name}': resource '{data['name']}' lists an "
                f"unsupported method '{e.verb}'"
            ) from e

        params = data.get("params") or {}
        if not isinstance(params, dict):
            raise SpecError(
                f"Spec '{spec_name}': resource '{data['name']}' 'params' must be an object"
            )
        for key, flag in params.items():
            if flag not in PARAM_REQUIREMENTS:
                raise SpecError(
                    f"Spec '{spec_name}': param '{key}' of resource '{data['name']}' "
                    f"must be 'required' or 'optional', got {flag!r}"
                )

        return cls(data["name"], data["path"], parsed_methods, params)

    def __eq__(self, other):
        if not isinstance(other, ResourceDef):
            return NotImplemented
        return (self.name, self.path, self.methods, dict(self.params)) == (
            other.name, other.path, other.methods, dict(other.params)
        )

    def __hash__(self):
        return hash((self.name, self.path, self.methods))

    def __repr__(self):
        methods = ",".join(sorted(m.value for m in self.methods))
        return f"ResourceDef(name={self.name!r}, path={self.path!r}, methods=[{methods}])"


class ApiSpec:
    """A named API: its root URL and its resources in declaration order."""

    __slots__ = ("_name", "_api_root", "_resources")

    def __init__(self, name, api_root, resources):
        self._name = name
        self._api_root = api_root
        self._resources = tuple(resources)

    @property
    def name(self):
        return self._name

    @property
    def api_root(self):
        return self._api_root

    @property
    def resources(self):
        return self._resources

    @classmethod
    def from_dict(cls, data, default_name=None):
        """Validate a decoded spec document and build an ApiSpec.

        ``default_name`` is used when the document carries no ``name``
        (e.g. the base name of the file it came from).
        """
        if not isinstance(data, dict):
            raise SpecError("Spec must be a JSON object")

        name = data.get("name", default_name)
        if not isinstance(name, str) or not name:
            raise SpecError(f"Spec is missing a string 'name': {data!r}"[:200])

        api_root = data.get("api_root")
        if not isinstance(api_root, str) or not re.match(r"^https?://", api_root):
            raise SpecError(
                f"Spec '{name}': 'api_root' must start with http:// or https://, "
                f"got: {api_root!r}"
            )

        resources = data.get("resources")
        if not isinstance(resources, list):
            raise SpecError(f"Spec '{name}': 'resources' must be a list")

        return cls(
            name,
            api_root,
            [ResourceDef.from_dict(r, spec_name=name) for r in resources],
        )

    def __repr__(self):
        return (
            f"ApiSpec(name={self.name!r}, api_root={self.api_root!r}, "
            f"resources={len(self.resources)})"
        )


def load_spec_file(path):
    """Read and validate one spec file. The file base name is the fallback name."""
    default_name = os.path.splitext(os.path.basename(path))[0]
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SpecError(f"Spec file '{path}' is not valid JSON: {e}") from e
    except OSError as e:
        raise SpecError(f"Cannot read spec file '{path}': {e}") from e

    try:
        return ApiSpec.from_dict(data, default_name=default_name)
    except SpecError as e:
        raise SpecError(f"{path}: {e}") from e
