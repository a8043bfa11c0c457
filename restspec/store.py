"""Registry of named API specs."""

import glob
import os

import singer

from restspec.errors import DuplicateSpecName, SpecError, SpecNotFound
from restspec.spec import ApiSpec, load_spec_file

LOGGER = singer.get_logger()

DEFAULT_SPEC_DIR = os.path.join(os.path.dirname(__file__), "specs")


class SpecStore:
    """Holds ApiSpec objects by name. Specs are read-only once registered."""

    def __init__(self):
        self._specs = {}

    def load(self, directory):
        """Load every ``*.json`` spec in ``directory``, keyed by file base name.

        Returns a dict of the specs loaded by this call.
        """
        if not os.path.isdir(directory):
            raise SpecError(f"Spec directory does not exist: '{directory}'")

        # Validate every file before registering any of them
        loaded = {}
        for path in sorted(glob.glob(os.path.join(directory, "*.json"))):
            key = os.path.splitext(os.path.basename(path))[0]
            loaded[key] = load_spec_file(path)

        for key in loaded:
            if key in self._specs:
                raise DuplicateSpecName(key)
        self._specs.update(loaded)

        LOGGER.info("Loaded %d spec(s) from %s: %s",
                    len(loaded), directory, ", ".join(loaded) or "-")
        return loaded

    def add(self, spec):
        """Register ``spec`` (an ApiSpec or a decoded spec dict) under its name."""
        if not isinstance(spec, ApiSpec):
            spec = ApiSpec.from_dict(spec)
        self._register(spec.name, spec)
        LOGGER.info("Added spec '%s' (%d resources)", spec.name, len(spec.resources))
        return spec

    def _register(self, key, spec):
        if key in self._specs:
            raise DuplicateSpecName(key)
        self._specs[key] = spec

    def get(self, name):
        try:
            return self._specs[name]
        except KeyError:
            raise SpecNotFound(name) from None

    def names(self):
        return list(self._specs)

    def __contains__(self, name):
        return name in self._specs

    def __len__(self):
        return len(self._specs)

    def __iter__(self):
        return iter(self._specs)
